"""
Shared rate limiter for API routes.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from orchard_planner.config import settings


limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

# Limit string applied to every compute route
DEFAULT_LIMIT = f"{settings.rate_limit_requests}/minute"

# Error responses shared by the compute routes in OpenAPI
COMMON_ERROR_RESPONSES = {
    400: {"description": "Invalid model, middle bed, acres or utilization"},
    422: {"description": "Malformed request parameters"},
    429: {"description": "Rate limit exceeded"},
}
