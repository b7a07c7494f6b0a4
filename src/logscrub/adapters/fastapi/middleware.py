"""FastAPI adapter – request parameter logging middleware.

Logs the query-string, form and JSON parameters of each HTTP request after
running them through a :class:`~logscrub.params.ParameterFilter`.  Form and
JSON bodies are buffered and replayed, so downstream handlers still read them
unchanged; other bodies (uploads, streams) pass through unread.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

from logscrub.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

    from logscrub.params import ParameterFilter


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'logscrub[fastapi]' to use the FastAPI adapter"
        ) from exc


def _merge_pairs(pairs: list[tuple[str, str]]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for key, value in pairs:
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params


_FORM = "application/x-www-form-urlencoded"


def _is_json(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")


def _body_params(media_type: str, body: bytes) -> dict[str, Any]:
    if not body:
        return {}
    if media_type == _FORM:
        return _merge_pairs(parse_qsl(body.decode("latin-1"), keep_blank_values=True))
    try:
        data = json.loads(body)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {"_json": data}


class FastAPIRequestLoggingMiddleware:
    """Log filtered request parameters for every HTTP request.

    Parameters
    ----------
    app:
        The inner ASGI application.
    parameter_filter:
        Filter applied to the collected parameters before logging.
    logger:
        Any logger with an ``info(event, **kw)`` method.  Defaults to the
        module's structlog logger.
    event:
        Event name of the log entry.
    """

    def __init__(
        self,
        app: "ASGIApp",
        parameter_filter: "ParameterFilter",
        logger: Any = None,
        event: str = "request.params",
    ) -> None:
        _require_fastapi()
        self.app = app
        self._filter = parameter_filter
        self._log = logger if logger is not None else get_logger(__name__)
        self._event = event

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        query_string = scope.get("query_string", b"").decode("latin-1")
        params = _merge_pairs(parse_qsl(query_string, keep_blank_values=True))

        headers = dict(scope.get("headers", []))
        content_type = headers.get(b"content-type", b"").decode("latin-1")
        media_type = content_type.split(";", 1)[0].strip().lower()

        # Only form and JSON bodies are parsed; anything else (uploads,
        # streams) goes to the app without being read here.
        downstream_receive = receive
        if media_type == _FORM or _is_json(media_type):
            buffered: list["Message"] = []
            chunks: list[bytes] = []
            more_body = True
            while more_body:
                message = await receive()
                buffered.append(message)
                if message["type"] != "http.request":
                    break
                chunks.append(message.get("body", b""))
                more_body = message.get("more_body", False)

            params.update(_body_params(media_type, b"".join(chunks)))

            async def replay() -> "Message":
                if buffered:
                    return buffered.pop(0)
                return await receive()

            downstream_receive = replay

        self._log.info(
            self._event,
            method=scope.get("method", "GET"),
            path=scope.get("path", ""),
            params=self._filter.filter(params),
        )

        await self.app(scope, downstream_receive, send)


__all__ = ["FastAPIRequestLoggingMiddleware"]
