"""Helpers for validating identifiers and request payloads."""

import uuid
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.services.errors import InvalidArgumentError

RequestT = TypeVar("RequestT", bound=BaseModel)


def is_uuid(value: Any) -> bool:
    try:
        uuid.UUID(str(value))
    except (TypeError, ValueError):
        return False
    return True


def ensure_uuid(value: Any, label: str) -> str:
    """Return value as a string, or raise InvalidArgumentError if it is not a UUID."""
    if not isinstance(value, str) or not is_uuid(value):
        raise InvalidArgumentError(f"Invalid {label} ID")
    return value


def new_id() -> str:
    return str(uuid.uuid4())


def validate_request(model: type[RequestT], payload: RequestT | dict[str, Any]) -> RequestT:
    """
    Coerce a plain payload into a request model.

    Already-built model instances were validated on construction and are
    returned as is. Validation failures become InvalidArgumentError carrying
    the pydantic error list.
    """
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        details = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        raise InvalidArgumentError("Invalid request payload", details=details) from e
