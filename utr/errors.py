"""Error taxonomy for failed UTR API queries."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Why a query failed."""

    TRANSPORT = 'transport'
    BAD_STATUS = 'bad_status'
    DECODE_FAILURE = 'decode_failure'


class UTRAPIError(Exception):
    """Base class for every failure surfaced by the query client."""

    kind: ErrorKind

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(UTRAPIError):
    """Connection, DNS or timeout failure before a response arrived."""

    kind = ErrorKind.TRANSPORT


class BadStatusError(UTRAPIError):
    """The service answered with a non-2xx status."""

    kind = ErrorKind.BAD_STATUS

    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(f'HTTP {status_code}', url=url)
        self.status_code = status_code


class DecodeError(UTRAPIError):
    """The body was not JSON or did not match the expected schema."""

    kind = ErrorKind.DECODE_FAILURE
