"""
Explicit binding of JSON request bodies to schemas.

``bind_json`` never raises on bad input. It returns a ``BindResult`` tagged
either as bound (carrying the validated model) or failed (carrying the
error strings), and the caller decides how to abort.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from configui.core.exceptions import BindError


ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class BindResult(Generic[ModelT]):
    """Outcome of binding a request body."""
    value: Optional[ModelT] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    @classmethod
    def bound(cls, value: ModelT) -> "BindResult[ModelT]":
        return cls(value=value)

    @classmethod
    def failed(cls, errors: List[str]) -> "BindResult[ModelT]":
        return cls(errors=list(errors) or ["body: invalid request body"])

    def unwrap(self) -> ModelT:
        """Return the bound value or raise ``BindError`` with the collected errors."""
        if not self.ok:
            raise BindError(self.errors)
        return self.value


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten pydantic errors into ``"<location>: <message>"`` strings."""
    errors = []
    for error in exc.errors():
        location = " -> ".join(["body"] + [str(loc) for loc in error.get("loc", ())])
        message = error.get("msg", "Validation error")
        errors.append(f"{location}: {message}")
    return errors


def bind_payload(model: Type[ModelT], raw: bytes) -> BindResult[ModelT]:
    """
    Parse ``raw`` as JSON and validate it against ``model``.

    Args:
        model: Pydantic model describing the expected body
        raw: Raw request body

    Returns:
        A bound result, or a failed one when the body is empty, is not JSON,
        is not a JSON object, or does not satisfy the model.
    """
    if not raw or not raw.strip():
        return BindResult.failed(["body: request body is empty"])

    try:
        payload: Any = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        return BindResult.failed([f"body: invalid JSON ({exc})"])

    if not isinstance(payload, dict):
        return BindResult.failed(["body: expected a JSON object"])

    return bind_mapping(model, payload)


def bind_mapping(model: Type[ModelT], payload: Dict[str, Any]) -> BindResult[ModelT]:
    """Validate an already decoded JSON object against ``model``."""
    try:
        return BindResult.bound(model.model_validate(payload))
    except ValidationError as exc:
        return BindResult.failed(format_validation_errors(exc))


async def bind_json(request: Request, model: Type[ModelT]) -> BindResult[ModelT]:
    """Read the request body and bind it to ``model``."""
    return bind_payload(model, await request.body())


def json_body_spec(model: Type[BaseModel], description: str) -> Dict[str, Any]:
    """
    OpenAPI ``requestBody`` entry for a route that binds ``model`` by hand.
    """
    return {
        "requestBody": {
            "description": description,
            "required": True,
            "content": {
                "application/json": {
                    "schema": model.model_json_schema()
                }
            }
        }
    }
