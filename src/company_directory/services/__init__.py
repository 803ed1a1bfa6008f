"""Services package."""

from company_directory.services.company_service import CompanyService
from company_directory.services.request_moderator import RequestModerator
from company_directory.services.slug_allocator import SlugAllocator

__all__ = ["CompanyService", "RequestModerator", "SlugAllocator"]
