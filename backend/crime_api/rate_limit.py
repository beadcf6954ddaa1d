"""Request rate limiting for write endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from crime_api.config import get_settings

settings = get_settings()

limiter = Limiter(key_func=get_remote_address)

# Applied to PUT /new-incident and DELETE /remove-incident
write_limit = f"{settings.rate_limit_per_minute}/minute"
