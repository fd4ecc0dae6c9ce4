"""Rate limiter configuration for book write endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings

# Rate limiter instance - shared across modules
limiter = Limiter(key_func=get_remote_address)

# Limit applied to create/update/delete routes
write_limit = settings.write_rate_limit
