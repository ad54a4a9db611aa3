"""
Shared request dependencies.

``get_store`` hands endpoints the store handle attached to the
application by ``create_app``.  ``read_body`` accepts both JSON and
form-encoded bodies, since browser forms post the latter.
"""

import json
import logging
from typing import Any, Dict

from fastapi import Request

from ..store import ExerciseStore


logger = logging.getLogger(__name__)


def get_store(request: Request) -> ExerciseStore:
    return request.app.state.store


async def read_body(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict; unreadable bodies count as empty."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Ignoring malformed JSON body on %s", request.url.path)
            return {}
        return payload if isinstance(payload, dict) else {}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
