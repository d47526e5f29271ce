"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from voltshare.api.routes import auth, bills, calculator, dashboard, health, rentals
from voltshare.core.config import settings
from voltshare.core.database import Base, engine
from voltshare.core.logging_config import configure_logging

# Import models so Base.metadata knows every table before create_all
from voltshare.models import (
    bill,  # noqa: F401
    rental,  # noqa: F401
    user,  # noqa: F401
)

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup: Create database tables
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Share a building's unmetered electricity across rooms and bill each room",
    lifespan=lifespan,
)

# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(auth.router, prefix="/api")
app.include_router(calculator.router, prefix="/api")
app.include_router(bills.router, prefix="/api")
app.include_router(rentals.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "voltshare.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
