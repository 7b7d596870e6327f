from sqlalchemy import Column, Date, ForeignKey, Integer, String

from app.db.session import Base


class Teacher(Base):
    __tablename__ = "teacher"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name_paternal = Column(String(100), nullable=False)
    last_name_maternal = Column(String(100), nullable=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=True)
    hire_date = Column(Date, nullable=True)
    area_id = Column(Integer, ForeignKey("academic_area.id", ondelete="RESTRICT"), nullable=False)
    academic_level = Column(String(30), nullable=False)
