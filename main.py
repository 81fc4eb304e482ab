"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from api.router import api_router
from config import APP_TITLE, APP_VERSION, CORS_ORIGINS
from core.i18n_logger import get_i18n_logger
from core.utils import log_requests
from database.session import engine, create_tables

logger = get_i18n_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    await create_tables(engine)
    logger.info("app.startup", title=APP_TITLE, version=APP_VERSION)
    yield
    await engine.dispose()


# Initialize FastAPI application
app = FastAPI(
    title=APP_TITLE,
    description="Catalog backend: CRUD and keyword search over products, with optional image attachment",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(log_requests)

# Include API router
app.include_router(api_router, prefix="/api")


@app.exception_handler(SQLAlchemyError)
async def store_failure_handler(request: Request, exc: SQLAlchemyError):
    """Answer any persistence error with a generic 500"""
    logger.error(
        "app.store_failure",
        method=request.method,
        path=request.url.path,
        error=str(exc)
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
