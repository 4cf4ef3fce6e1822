"""Erros de domínio do serviço de eventos.

Cada erro carrega um código estável e uma mensagem segura para o cliente;
o mapeamento para status HTTP fica nos handlers de app/main.py.
"""

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    VENUE_CONFLICT = "VENUE_CONFLICT"
    ORGANIZER_CONFLICT = "ORGANIZER_CONFLICT"
    INVALID_FILTER = "INVALID_FILTER"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    status_code = 400

    def __init__(self, code: ErrorCode, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EntityNotFoundError(DomainError):
    """Raised by the repositories when an id-addressed record is missing."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(
            code=ErrorCode.ENTITY_NOT_FOUND,
            message=f"{entity} não encontrado",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class BookingConflictError(DomainError):
    """Venue or organizer already booked for an overlapping range."""

    status_code = 409

    def __init__(self, code: ErrorCode, message: str, conflicting_ids: list[int]) -> None:
        super().__init__(code=code, message=message, details={"conflictingIds": conflicting_ids})
        self.conflicting_ids = conflicting_ids


class InvalidFilterError(DomainError):
    """Malformed where/fields/include expression on the query string."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_FILTER, message=message)
