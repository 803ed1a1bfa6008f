"""Run the API with uvicorn: ``python -m company_directory``."""

import uvicorn

from company_directory.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "company_directory.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
    )
