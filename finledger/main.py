import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from finledger.api import auth, categories, goals, investments, transactions
from finledger.core.config import CORS_ORIGINS, LOG_LEVEL
from finledger.core.errors import AppError, DatabaseError, ResourceNotOwned
from finledger.core.logging import configure_logging
from finledger.database import create_db_and_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(LOG_LEVEL)
    create_db_and_tables()
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ResourceNotOwned):
        logger.warning("%s %s: %s %s not owned", request.method, request.url.path, exc.resource, exc.resource_id)
        exc = exc.as_not_found()
    elif isinstance(exc, DatabaseError):
        logger.error("%s %s: database error", request.method, request.url.path, exc_info=exc.cause)
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def create_app(with_lifespan: bool = True) -> FastAPI:
    app = FastAPI(title="finledger", lifespan=lifespan if with_lifespan else None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)

    app.include_router(auth.router)
    app.include_router(categories.router)
    app.include_router(transactions.router)
    app.include_router(investments.router)
    app.include_router(goals.router)

    @app.get("/")
    def root():
        return {"message": "finledger API"}

    return app


app = create_app()
