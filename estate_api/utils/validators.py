"""
Validation helpers shared by routers, services and the sample-data loader.
Converts Pydantic errors into field-level errors and parses path parameters.
"""

import re
from typing import Any, Dict, List, Sequence, Type, TypeVar
from pydantic import BaseModel, ValidationError as PydanticValidationError

from estate_api.utils.exceptions import ValidationError, InvalidIdentifierError, InvalidFilterError

SchemaType = TypeVar("SchemaType", bound=BaseModel)
EnumType = TypeVar("EnumType")

POSITIVE_INT_PATTERN = re.compile(r"^[0-9]+$")

# Request locations FastAPI prefixes onto error paths
REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def format_field_errors(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Convert Pydantic error entries into `{field, message}` pairs.

    Args:
        errors: Output of `ValidationError.errors()`

    Returns:
        One entry per violated field, in the order Pydantic reported them
    """
    field_errors = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = " -> ".join(str(part) for part in loc) or "body"

        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]

        field_errors.append({"field": field, "message": message})
    return field_errors


def validate_model(schema: Type[SchemaType], data: Any) -> SchemaType:
    """
    Validate arbitrary input against a schema.

    Args:
        schema: Pydantic schema class to validate against
        data: Raw input, usually a decoded JSON object

    Returns:
        Validated schema instance

    Raises:
        ValidationError: Listing every violated field
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError("Validation error", field_errors=format_field_errors(e.errors()))


def parse_positive_int(value: str, label: str = "ID") -> int:
    """
    Parse a path parameter as a positive integer.

    Only plain digits are accepted, so "12abc", "-3" and "1.5" are rejected.

    Raises:
        InvalidIdentifierError: If the value is not a positive integer
    """
    text = value.strip()
    if not POSITIVE_INT_PATTERN.match(text):
        raise InvalidIdentifierError(label, value)
    number = int(text)
    if number < 1:
        raise InvalidIdentifierError(label, value)
    return number


def parse_limit(value: str, label: str = "limit value") -> int:
    """
    Parse a result limit path parameter.

    Any run of digits is accepted, so "0" yields an empty result.

    Raises:
        InvalidIdentifierError: If the value is not a non-negative integer
    """
    text = value.strip()
    if not POSITIVE_INT_PATTERN.match(text):
        raise InvalidIdentifierError(label, value)
    return int(text)


def parse_enum(enum_cls: Type[EnumType], value: str, label: str) -> EnumType:
    """
    Convert a string into a member of `enum_cls`.

    Raises:
        InvalidFilterError: If the value is not one of the enumeration's values
    """
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidFilterError(label, value, [member.value for member in enum_cls])
