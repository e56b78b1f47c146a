from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.api.v1 import health, people
from app.core.config import settings
from app.core.db import create_db_engine, init_db
from app.core.errors import PeopleServiceException, StoreError
from app.core.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """
    build the application around one shared engine
    pass an engine to point the app at a different store (tests do this)
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.engine = engine if engine is not None else create_db_engine(
        settings.DATABASE_URL, echo=settings.SQL_ECHO
    )

    @app.on_event("startup")
    def on_startup():
        init_db(app.state.engine)
        logger.info(f"{settings.PROJECT_NAME} ready on port {settings.PORT}")

    @app.exception_handler(PeopleServiceException)
    async def people_service_exception_handler(request: Request, exc: PeopleServiceException):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # no validation layer of our own: malformed payloads look like store rejections
        logger.warning(f"rejected payload on {request.method} {request.url.path}: {exc.errors()}")
        error = StoreError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.get("/")
    def read_root():
        return {"message": "Welcome to People API"}

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(people.router, prefix="/people", tags=["people"])

    return app


def run():
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
