from sqlalchemy import Column, ForeignKey, Integer, String

from app.core.enums import CourseLevel, CourseModality, CourseStatus
from app.db.session import Base


class Course(Base):
    """Course offering. Area and teacher are optional references."""

    __tablename__ = "course"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    level = Column(String(20), nullable=False, default=CourseLevel.BACHELOR.value)
    modality = Column(String(20), nullable=False, default=CourseModality.IN_PERSON.value)
    duration_weeks = Column(Integer, nullable=True)
    credits = Column(Integer, nullable=True)
    max_capacity = Column(Integer, nullable=True)
    status = Column(String(20), nullable=False, default=CourseStatus.ACTIVE.value)
    area_id = Column(Integer, ForeignKey("academic_area.id", ondelete="RESTRICT"), nullable=True)
    teacher_id = Column(Integer, ForeignKey("teacher.id", ondelete="RESTRICT"), nullable=True)
