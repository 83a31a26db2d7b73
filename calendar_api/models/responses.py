"""Response envelope shared by every API route."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform wrapper: `success` plus either `data` or `message`."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=None)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, data=None, message=message)
