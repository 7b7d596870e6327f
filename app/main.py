import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.areas.router import router as areas_router
from app.api.v1.assistant.router import router as assistant_router
from app.api.v1.careers.router import router as careers_router
from app.api.v1.courses.router import router as courses_router
from app.api.v1.dashboard.router import router as dashboard_router
from app.api.v1.students.router import router as students_router
from app.api.v1.teachers.router import router as teachers_router
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.init_db import create_tables
from app.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables(engine)
    logger.info("Campus admin API ready")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="Campus Admin Panel", lifespan=lifespan)

    # CORS: allow the panel front end to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Error-Kind"],
    )

    # Routers
    app.include_router(dashboard_router)
    app.include_router(areas_router)
    app.include_router(careers_router)
    app.include_router(courses_router)
    app.include_router(teachers_router)
    app.include_router(students_router)
    app.include_router(assistant_router)

    @app.get("/", tags=["health"])
    async def read_root():
        return {"status": "ok", "service": app.title}

    return app


app = create_app()
