"""FastAPI application entry point."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from company_directory.config import settings
from company_directory.logging_config import setup_logging
from company_directory.routers import companies, requests
from company_directory.services.errors import DirectoryError

setup_logging(settings.log_level, settings.log_file)

app = FastAPI(
    title="Company Directory API",
    description="Company directory with slug allocation and hiring-request moderation",
    version="0.1.0",
)


@app.exception_handler(DirectoryError)
async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    """Answer core errors with their mapped status and a stable error kind."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "kind": exc.kind},
    )


# Mount routers
app.include_router(companies.router, prefix="/api")
app.include_router(requests.router, prefix="/api")
