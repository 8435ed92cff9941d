# forum/utils/requests.py
from __future__ import annotations

from typing import Any, Dict, Mapping

from flask import request
from werkzeug.exceptions import BadRequest


def parse_request_json() -> Dict[str, Any]:
    """
    Body of the current request as a flat JSON object.
    Malformed JSON or a non-object body is a 400.
    """
    data = request.get_json(force=True)
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object.")
    return data


def opt_string(data: Mapping[str, Any], key: str) -> str:
    """String value of `key`; missing or null fields read as ""."""
    value = data.get(key)
    return "" if value is None else str(value)
