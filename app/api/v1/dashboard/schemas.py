from typing import List, Optional

from pydantic import BaseModel, Field

from app.core.schemas import NamedRef


class DashboardCounts(BaseModel):
    courses: int = Field(..., description="All courses")
    active_courses: int = Field(..., description="Courses whose status is Active")
    teachers: int
    areas: int
    students: int
    careers: int


class ChartItem(BaseModel):
    label: str
    value: int
    percent: int = Field(..., description="round(value / total * 100); items need not sum to 100")
    start: float = Field(..., description="Cumulative segment start, percent of the whole")
    end: float


class CourseRankingItem(BaseModel):
    id: int
    name: Optional[str] = None
    students: int


class RecentCourse(BaseModel):
    id: int
    name: str
    level: str
    modality: str
    status: str
    area: Optional[NamedRef] = None


class DashboardSummary(BaseModel):
    counts: DashboardCounts
    students_by_status: List[ChartItem]
    students_by_career: List[ChartItem]
    top_courses: List[CourseRankingItem]
    recent_courses: List[RecentCourse]
