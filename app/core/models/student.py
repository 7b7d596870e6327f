from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, UniqueConstraint

from app.core.enums import StudentStatus
from app.db.session import Base


class Student(Base):
    """Enrolled student. student_number and email are unique across the campus."""

    __tablename__ = "student"
    __table_args__ = (
        UniqueConstraint("student_number", name="uq_student_number"),
        UniqueConstraint("email", name="uq_student_email"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_number = Column(String(30), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name_paternal = Column(String(100), nullable=False)
    last_name_maternal = Column(String(100), nullable=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=True)
    birth_date = Column(Date, nullable=False)
    enrollment_date = Column(Date, nullable=False)
    career_id = Column(Integer, ForeignKey("career.id", ondelete="RESTRICT"), nullable=False)
    course_id = Column(Integer, ForeignKey("course.id", ondelete="RESTRICT"), nullable=False)
    current_semester = Column(Integer, nullable=False, default=1)
    average_grade = Column(Float, nullable=True)
    status = Column(String(20), nullable=False, default=StudentStatus.ACTIVE.value)
