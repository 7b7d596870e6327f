import asyncio
import logging
from typing import Any, Dict

from app.api.v1.courses import service as course_service
from app.api.v1.students import service as student_service
from app.core.config import settings
from app.core.enums import CourseStatus
from app.db.data_service import DataServiceClient

from . import aggregation

logger = logging.getLogger(__name__)


async def get_counts(client: DataServiceClient) -> Dict[str, int]:
    courses, active_courses, teachers, areas, students, careers = await asyncio.gather(
        client.count("course"),
        client.count("course", {"status": CourseStatus.ACTIVE.value}),
        client.count("teacher"),
        client.count("academic_area"),
        client.count("student"),
        client.count("career"),
    )
    return {
        "courses": courses,
        "active_courses": active_courses,
        "teachers": teachers,
        "areas": areas,
        "students": students,
        "careers": careers,
    }


async def get_chart_data(client: DataServiceClient, top_courses: int) -> Dict[str, Any]:
    students = await student_service.list_students_for_charts(client)
    course_ids = sorted({s["course_id"] for s in students if s.get("course_id")})
    courses = []
    if course_ids:
        courses = await client.list("course", select=("id", "name"), filters={"id": course_ids})
    return {
        "students_by_status": aggregation.chart_items(aggregation.status_distribution(students)),
        "students_by_career": aggregation.chart_items(aggregation.career_distribution(students)),
        "top_courses": aggregation.course_ranking(students, courses, limit=top_courses),
    }


async def get_summary(
    client: DataServiceClient,
    top_courses: int = settings.dashboard_top_courses,
    recent_courses: int = settings.dashboard_recent_courses,
) -> Dict[str, Any]:
    """Counts, chart data and recent courses, fetched as independent concurrent requests."""
    counts, charts, recent = await asyncio.gather(
        get_counts(client),
        get_chart_data(client, top_courses),
        course_service.list_recent_courses(client, limit=recent_courses),
    )
    logger.debug("Dashboard summary: %s", counts)
    return {"counts": counts, "recent_courses": recent, **charts}
