from sqlalchemy import Column, ForeignKey, Integer, String

from app.core.enums import AcademicLevel, CareerStatus
from app.db.session import Base


class Career(Base):
    __tablename__ = "career"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    academic_level = Column(String(30), nullable=False, default=AcademicLevel.BACHELOR.value)
    duration_semesters = Column(Integer, nullable=False)
    total_credits = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=CareerStatus.ACTIVE.value)
    area_id = Column(Integer, ForeignKey("academic_area.id", ondelete="RESTRICT"), nullable=False)
