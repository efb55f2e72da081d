from contextlib import asynccontextmanager
from fastapi import FastAPI
import uvicorn

from blogadmin.core import exceptions
from blogadmin.core.config import settings
from blogadmin.core.database import create_tables
from blogadmin.core.logger import logger
from blogadmin.core.response.handlers import (
    global_exception_handler,
    service_exception_handler,
)

# Import routers from apps
from blogadmin.apps.blog import post_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create database tables
    await create_tables()
    logger.info(f"Database ready at {settings.ASYNC_DATABASE_URL}")
    yield
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_INFO,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

# Add exception handlers
app.add_exception_handler(exceptions.ServiceException, service_exception_handler)  # type: ignore
app.add_exception_handler(Exception, global_exception_handler)


# Health check endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with health check."""
    return {"message": "Server is running!", "status": "healthy", "version": settings.PROJECT_VERSION}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "message": "Service is running normally"}


app.include_router(post_router)


if __name__ == "__main__":
    uvicorn.run(
        "blogadmin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,  # Enable auto-reload in development
        log_level="info",
    )
