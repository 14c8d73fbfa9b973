"""
Result and error types returned by the services.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Business outcomes that end a request without a value."""

    VALIDATION = "validation"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str
    # Field level messages, only set for VALIDATION errors.
    violations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either ``value`` or ``error`` is meaningful, never both."""

    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[T]":
        return cls(error=error)


def not_found(resource: str, key: Any, field_name: str = "id") -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, f"{resource} with {field_name} '{key}' not found.")


def already_exists(resource: str, entity_id: int) -> ServiceError:
    return ServiceError(ErrorKind.ALREADY_EXISTS, f"{resource} with id '{entity_id}' already exists.")


def invalid(violations: List[str]) -> ServiceError:
    return ServiceError(
        ErrorKind.VALIDATION,
        f"Object sent is not valid: [{', '.join(violations)}]",
        violations=list(violations),
    )
