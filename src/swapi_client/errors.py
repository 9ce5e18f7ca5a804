"""
Error family surfaced by the client.

Callers catch `APIError` and read `reason`. The two subclasses only record
where the failure came from:
- TransportError: connection/DNS failure, timeout, non-2xx status
- DecodeError: body is not JSON or does not match the expected schema
"""
from __future__ import annotations

import httpx

class APIError(Exception):

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

class TransportError(APIError):
    pass

class DecodeError(APIError):
    pass

def normalize_error(exc: BaseException) -> APIError:
    """Wrap a transport or decode failure; the original message becomes `reason` verbatim."""
    if isinstance(exc, APIError):
        return exc
    # some httpx timeouts carry an empty message
    reason = str(exc) or exc.__class__.__name__
    if isinstance(exc, httpx.HTTPError):
        return TransportError(reason)
    # pydantic.ValidationError is a ValueError, as is json.JSONDecodeError
    if isinstance(exc, ValueError):
        return DecodeError(reason)
    return APIError(reason)
