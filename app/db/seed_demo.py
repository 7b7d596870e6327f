"""
Seed a small demo campus through the catalog repositories.

Run once after init_db:
  python -m app.db.seed_demo

Creates (only when the academic_area relation is empty):
- academic areas: Engineering, Health Sciences
- one career per area, one teacher per area, two courses
- three students spread over those careers and courses
"""
import asyncio
import logging
from datetime import date

from app.api.v1.areas.service import repository as areas
from app.api.v1.careers.service import repository as careers
from app.api.v1.courses.service import repository as courses
from app.api.v1.students.service import repository as students
from app.api.v1.teachers.service import repository as teachers
from app.db.data_service import DataServiceClient

logger = logging.getLogger(__name__)


async def _create(repository, client: DataServiceClient, values: dict) -> int:
    row = await repository.create(client, repository.to_persist_shape(values))
    return row["id"]


async def seed_demo(client: DataServiceClient) -> bool:
    if await client.count("academic_area"):
        logger.info("Catalogs already hold data; skipping demo seed.")
        return False

    engineering = await _create(areas, client, {"name": "Engineering"})
    health = await _create(areas, client, {"name": "Health Sciences"})

    software = await _create(
        careers,
        client,
        {"name": "Software Engineering", "academic_level": "Bachelor", "duration_semesters": "8",
         "total_credits": "280", "area_id": engineering},
    )
    nursing = await _create(
        careers,
        client,
        {"name": "Nursing", "academic_level": "Bachelor", "duration_semesters": "9",
         "total_credits": "300", "area_id": health},
    )

    ada = await _create(
        teachers,
        client,
        {"first_name": "Ada", "last_name_paternal": "Lovelace", "email": "ada.lovelace@campus.edu",
         "area_id": engineering, "academic_level": "Doctorate", "hire_date": "2019-08-01"},
    )
    florence = await _create(
        teachers,
        client,
        {"first_name": "Florence", "last_name_paternal": "Nightingale", "email": "f.nightingale@campus.edu",
         "area_id": health, "academic_level": "Master"},
    )

    algorithms = await _create(
        courses,
        client,
        {"name": "Algorithms", "level": "Bachelor", "modality": "Hybrid", "duration_weeks": "16",
         "credits": "8", "max_capacity": "40", "area_id": engineering, "teacher_id": ada},
    )
    anatomy = await _create(
        courses,
        client,
        {"name": "Anatomy I", "level": "Bachelor", "modality": "In-person", "duration_weeks": "18",
         "credits": "10", "max_capacity": "35", "area_id": health, "teacher_id": florence},
    )

    enrolled = date.today().isoformat()
    for number, first, last, career, course, status in (
        ("A0001", "Grace", "Hopper", software, algorithms, "Active"),
        ("A0002", "Alan", "Turing", software, algorithms, "Active"),
        ("A0003", "Mary", "Seacole", nursing, anatomy, "TemporaryLeave"),
    ):
        await _create(
            students,
            client,
            {"student_number": number, "first_name": first, "last_name_paternal": last,
             "email": f"{first.lower()}.{last.lower()}@campus.edu", "birth_date": "2004-05-17",
             "enrollment_date": enrolled, "career_id": career, "course_id": course, "status": status},
        )
    logger.info("Demo campus seeded.")
    return True


async def main() -> None:
    from app.db.init_db import create_tables
    from app.db.session import AsyncSessionLocal, engine

    await create_tables(engine)
    await seed_demo(DataServiceClient(AsyncSessionLocal))
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
