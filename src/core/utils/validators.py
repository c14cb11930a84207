"""Request validation utilities."""

from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input (raw request bodies can be megabytes of binary)
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "base64" in msg_lower:
            msg = "Body must be valid base64-encoded binary"
        elif "field required" in msg_lower:
            msg = "This field is required"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def error_fields(errors: list[dict[str, Any]]) -> set[str]:
    """Return the top-level field names that failed validation."""
    return {str(err["loc"][0]) for err in errors if err.get("loc")}


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Raises:
        pydantic.ValidationError: If the data does not satisfy the model
    """
    return model.model_validate(data)
