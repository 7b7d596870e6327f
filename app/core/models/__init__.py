from app.core.models.academic_area import AcademicArea
from app.core.models.career import Career
from app.core.models.teacher import Teacher
from app.core.models.course import Course
from app.core.models.student import Student

# Relation name -> model, as addressed through the data service client.
RELATIONS = {
    AcademicArea.__tablename__: AcademicArea,
    Career.__tablename__: Career,
    Teacher.__tablename__: Teacher,
    Course.__tablename__: Course,
    Student.__tablename__: Student,
}

__all__ = [
    "AcademicArea",
    "Career",
    "Course",
    "RELATIONS",
    "Student",
    "Teacher",
]
