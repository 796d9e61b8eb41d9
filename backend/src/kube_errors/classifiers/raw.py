"""Read status, body and headers off raw failures.

Accepts exceptions or mappings shaped like the Kubernetes client's
ApiException: ``status``/``status_code``, ``body`` (JSON text or a mapping),
``headers``, optionally nested under ``response``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def _lookup(source: Any, name: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _sources(error: Any) -> list[Any]:
    response = _lookup(error, "response")
    return [s for s in (response, error) if s is not None]


def status_code_of(error: Any) -> int | None:
    """HTTP status, preferring the nested response's."""
    for source in _sources(error):
        for name in ("status_code", "statusCode", "status"):
            value = _lookup(source, name)
            if isinstance(value, bool):
                continue
            if isinstance(value, int):
                return value
            if isinstance(value, str) and value.isdigit():
                return int(value)
    return None


def body_of(error: Any) -> Any:
    """Response body; JSON text is decoded when possible."""
    for source in _sources(error):
        body = _lookup(source, "body")
        if body is None:
            continue
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        if isinstance(body, str):
            try:
                return json.loads(body)
            except ValueError:
                return body
        return body
    return None


def body_message(error: Any) -> str | None:
    """The ``message`` field of a Kubernetes Status body, if any."""
    body = body_of(error)
    if isinstance(body, Mapping) and body.get("message") is not None:
        return str(body["message"])
    return None


def header(error: Any, name: str) -> str | None:
    """Case-insensitive response header lookup."""
    wanted = name.lower()
    for source in _sources(error):
        headers = _lookup(source, "headers")
        if not headers:
            continue
        try:
            items = headers.items()
        except AttributeError:
            continue
        for key, value in items:
            if str(key).lower() == wanted:
                return str(value)
    return None


def error_message(error: Any) -> str:
    if isinstance(error, BaseException):
        return str(error)
    message = _lookup(error, "message")
    if message:
        return str(message)
    return str(error)


def as_exception(error: Any) -> BaseException | None:
    return error if isinstance(error, BaseException) else None
