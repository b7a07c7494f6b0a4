"""FastAPI app that logs GraphQL requests with passwords scrubbed.

Run with::

    pip install 'logscrub[fastapi]' uvicorn
    LOGSCRUB_FILTERED_ARGS=password,token uvicorn docs.examples.fastapi_app:app

    curl localhost:8000/graphql -H 'content-type: application/json' \\
        -d '{"query": "mutation { login(password: \\"hunter2\\") { token } }"}'

The request log line reads::

    {"method": "POST", "path": "/graphql",
     "params": {"query": "mutation {\\n  login(password: [FILTERED]) ..."},
     "event": "request.params", ...}
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request

from logscrub.adapters.fastapi import FastAPIRequestLoggingMiddleware
from logscrub.config import load_settings
from logscrub.observability.logging import JsonLoggerFactory
from logscrub.params import build_parameter_filter

settings = load_settings()
parameter_filter = build_parameter_filter(settings)
JsonLoggerFactory.configure(parameter_filter=parameter_filter)

app = FastAPI()
app.add_middleware(FastAPIRequestLoggingMiddleware, parameter_filter=parameter_filter)


@app.post("/graphql")
async def graphql(request: Request) -> Any:
    payload = await request.json()
    return {"data": None, "received": sorted(payload)}
