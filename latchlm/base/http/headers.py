"""Header value validation for provider builders.

Values end up in HTTP headers verbatim, so they are checked once, at build
time, rather than failing on the first request.
"""

from __future__ import annotations

from ..errors import ProviderError


def validate_header_value(provider: str, header: str, value: str) -> str:
    """Return ``value`` unchanged if it can be sent as a header value.

    Raises:
        ProviderError: for empty values, non-ASCII text, or control
            characters (CR/LF injection included).
    """
    if not value:
        raise ProviderError(provider, f"Failed to parse header: {header} is empty")
    if not value.isascii() or any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value if ch != "\t"):
        raise ProviderError(provider, f"Failed to parse header: invalid value for {header}")
    return value


__all__ = ["validate_header_value"]
