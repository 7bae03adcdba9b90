"""Common schemas and the response envelope."""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def envelope(data: Any = None, message: str | None = None) -> dict:
    """Successful response body. Omits empty keys."""
    body: dict = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def error_body(message: str, details: Any = None) -> dict:
    body: dict = {"success": False, "message": message}
    if details is not None:
        body["details"] = details
    return body


def dump(model: BaseModel) -> dict:
    """Serialize a schema to its JSON (camelCase) form."""
    return model.model_dump(by_alias=True, mode="json")
