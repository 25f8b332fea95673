from __future__ import annotations

from flask import request


def json_body() -> dict:
    """Request JSON as a dict; anything else (absent, malformed, a list) is {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
