from sqlalchemy import Column, Integer, String

from app.db.session import Base


class AcademicArea(Base):
    """Top-level grouping for careers, courses and teachers."""

    __tablename__ = "academic_area"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
