from typing import Optional

from fastapi import HTTPException, status

from app.core.enums import ErrorKind


class ServiceError(Exception):
    """Base exception for service layer errors."""

    kind: str = ErrorKind.GENERIC.value

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationFailure(ServiceError):
    """Form values rejected locally, before any call to the data service."""

    kind = ErrorKind.VALIDATION.value

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.field = field


_KIND_STATUS = {
    ErrorKind.UNIQUENESS_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.REFERENTIAL_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.GENERIC: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class DataServiceError(ServiceError):
    """Classified failure reported by the data service (or re-worded by a repository)."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message, _KIND_STATUS.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR))
        self.kind = ErrorKind(kind).value
        self.error_kind = ErrorKind(kind)


def to_http_exception(e: ServiceError) -> HTTPException:
    """Router-side translation: message in ``detail``, error kind in ``X-Error-Kind``."""
    return HTTPException(status_code=e.status_code, detail=e.message, headers={"X-Error-Kind": e.kind})
