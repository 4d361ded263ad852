"""
Request payload builders for option models.

Option models are pydantic models whose field declarations carry the wire
policy of each field:

- ``Field(exclude=True)`` keeps a field out of the JSON body.
- A ``None`` default marks an explicit field: it is sent whenever it is not
  ``None``, including empty strings, ``0`` and ``False``.
- Any other default marks an omit-empty field: it is sent only when it differs
  from the zero value of its type.
- ``json_schema_extra={"required": True}`` fails the build when the value is
  empty.
- ``json_schema_extra={"query": "<key>"}`` routes the field to the query string.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel  # type: ignore
from pydantic.fields import FieldInfo  # type: ignore

from meetingsdk.exceptions.meeting_exceptions import MissingFieldError


def _extra(field: FieldInfo) -> Dict[str, Any]:
    extra = field.json_schema_extra
    return extra if isinstance(extra, dict) else {}


def _is_explicit(field: FieldInfo) -> bool:
    return field.default is None


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, BaseModel):
        return False
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def _encode(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return build_request_body(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def check_required(opts: BaseModel) -> None:
    """Raise MissingFieldError for the first required field left empty."""
    for name, field in type(opts).model_fields.items():
        if _extra(field).get("required") and _is_zero(getattr(opts, name)):
            raise MissingFieldError(name, {"model": type(opts).__name__})


def build_request_body(opts: BaseModel, parent: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON body for an option model.

    Args:
        opts: Option model instance
        parent: Optional key to nest the body under

    Returns:
        Dictionary ready to be sent as JSON

    Raises:
        MissingFieldError: If a required field is empty
    """
    check_required(opts)

    body: Dict[str, Any] = {}
    for name, field in type(opts).model_fields.items():
        if field.exclude or "query" in _extra(field):
            continue

        value = getattr(opts, name)
        if _is_explicit(field):
            if value is None:
                continue
        elif _is_zero(value):
            continue

        body[field.alias or name] = _encode(value)

    if parent:
        return {parent: body}
    return body


def _format_query_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    return str(value)


def build_query_params(opts: BaseModel) -> Dict[str, str]:
    """
    Build query parameters from the fields tagged with a query key.

    Omit-empty fields are skipped at their zero value; explicit fields are
    skipped only when None.

    Raises:
        MissingFieldError: If a required query field is empty
    """
    params: Dict[str, str] = {}
    for name, field in type(opts).model_fields.items():
        extra = _extra(field)
        key = extra.get("query")
        if not key:
            continue

        value = getattr(opts, name)
        if extra.get("required") and _is_zero(value):
            raise MissingFieldError(name, {"model": type(opts).__name__})
        if _is_explicit(field):
            if value is None:
                continue
        elif _is_zero(value):
            continue

        params[key] = _format_query_value(value)
    return params
