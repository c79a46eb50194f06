"""HTTP utilities package for providers.

Exposes the async client factory and header validation.
"""

from .client import new_async_client
from .headers import validate_header_value

__all__ = ["new_async_client", "validate_header_value"]
