import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import config
from app.db.store import DataStore
from app.routes import hub, camera, event, speaker, ai_trigger, watchlist

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# Show API requests in the logs
logging.getLogger("uvicorn.access").setLevel(logging.INFO)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Every start begins from the fixture snapshot
    app.state.store.initialize(seed=config.SEED_DATA)
    logger.info("🚀 Security hub backend started (%s): %s", config.ENV, app.state.store.counts())
    yield
    logger.info("Security hub backend stopped")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Build the API around ``store``; a fresh store is created and seeded when omitted."""
    if store is None:
        store = DataStore().initialize(seed=config.SEED_DATA)

    production = config.ENV == "production"
    app = FastAPI(
        title="Security Hub Monitoring Backend",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    for module in (hub, camera, event, speaker, ai_trigger, watchlist):
        app.include_router(module.router)

    @app.get("/health")
    def health():
        """Health check endpoint for Docker health checks"""
        return {"status": "healthy", "collections": app.state.store.counts()}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)
