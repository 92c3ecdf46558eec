from __future__ import annotations

from fastapi import status
from pydantic import ValidationError as PydanticValidationError


class KitchenError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(KitchenError):
    """Malformed input. ``field`` names the first offending field."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidReferenceError(KitchenError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} not found")
        self.item_id = item_id


class NotFoundError(KitchenError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(KitchenError):
    status_code = status.HTTP_401_UNAUTHORIZED


class StoreError(KitchenError):
    """Persistence failure. The message is safe to show to callers."""


def first_validation_error(errors: list[dict]) -> ValidationError:
    """Collapse pydantic error details into the first failing field."""
    if not errors:
        return ValidationError("body", "Invalid request")
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] in ("body", "path", "query", "header"):
        loc = loc[1:]
    field = ".".join(loc) or "body"
    message = error.get("msg", "Invalid value")
    ctx = error.get("ctx") or {}
    if "error" in ctx:
        message = str(ctx["error"])
    return ValidationError(field, message)


def from_pydantic(exc: PydanticValidationError) -> ValidationError:
    return first_validation_error(exc.errors())
