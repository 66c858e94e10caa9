"""Helpers shared by the skill templates."""

import json
import re
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def capitalize(value: str) -> str:
    """Upper-case the first character only ("users" -> "Users")."""
    return value[:1].upper() + value[1:]


def _normalize(value: Any) -> Any:
    # JavaScript prints 2.0 as 2
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def js_json(value: Any) -> str:
    """Compact JSON, as JSON.stringify renders it inside generated code."""
    return json.dumps(_normalize(value), separators=(",", ":"), ensure_ascii=False)


def js_scalar(value: str | int | float | bool) -> str:
    """Render a bare number or boolean literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(_normalize(value))


def quoted(items: list[str], quote: str = "'") -> str:
    """['a', 'b'] -> "'a', 'b'" """
    return ", ".join(f"{quote}{item}{quote}" for item in items)


def strip_trailing_slash(value: str) -> str:
    return re.sub(r"/$", "", value)


def strip_leading_slash(value: str) -> str:
    return re.sub(r"^/", "", value)


def check_url(value: str) -> str:
    """Validate that value is an absolute URL and return it unchanged."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"Invalid URL: {value}") from e
    return value


def js_truthy(value: Any) -> bool:
    """JavaScript truthiness: empty lists and objects are truthy."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float, str)):
        return bool(value)
    return True


def js_text(value: Any) -> str:
    """Render a value the way a JS template literal interpolates it."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return js_scalar(value)
    return js_json(value)
