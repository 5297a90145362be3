import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from taskdesk import config
from taskdesk.database import Base, make_engine
from taskdesk.errors import register_exception_handlers
from taskdesk.logging_setup import setup_logging
from taskdesk.routers import auth, tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    try:
        # also the first round trip, so a bad connection fails startup here
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Database connection error")
        raise
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()
    logger.info("Database connection closed.")


def create_app(database_url: Optional[str] = None) -> FastAPI:
    app = FastAPI(title="TaskDesk", lifespan=lifespan)

    engine = make_engine(database_url or config.DATABASE_URL)
    app.state.engine = engine
    app.state.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def reject_foreign_origins(request: Request, call_next):
        # preflights are answered by CORSMiddleware; requests without an
        # Origin header (curl, server-to-server) are let through
        origin = request.headers.get("origin")
        if origin and request.method != "OPTIONS" and origin not in config.FRONTEND_ORIGINS:
            logger.warning("Rejected request to %s from origin %s", request.url.path, origin)
            return JSONResponse(status_code=403, content={"message": "Not allowed by CORS"})
        return await call_next(request)

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(tasks.router)
    return app


app = create_app()


def run() -> None:
    setup_logging(config.LOG_LEVEL)
    logger.info("Server is running on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    run()
