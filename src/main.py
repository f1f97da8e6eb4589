# src/main.py
"""
Google Cloud Function entry point for the design catalog API.

The function receives a Flask request, forwards it to the FastAPI application
as an ASGI call and returns the FastAPI response as a Flask response.
"""

import asyncio
from typing import Any, Dict, List, Tuple

import functions_framework
from flask import Request, Response

from api.main import app
from src.logger import info


def _build_scope(request: Request, path: str) -> Dict[str, Any]:
    headers: List[Tuple[bytes, bytes]] = [
        (k.lower().encode(), v.encode()) for k, v in request.headers.items()
    ]
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": request.method,
        "scheme": request.scheme,
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": request.query_string,
        "headers": headers,
        "client": None,
        "server": None,
    }


async def forward_to_app(request: Request) -> Response:
    """
    Run one Flask request through the FastAPI app and collect its response.
    """
    path = request.path or "/"
    body = request.get_data()

    info("Incoming request", method=request.method, path=path, content_length=len(body))

    status_code = 500
    response_headers: List[Tuple[str, str]] = []
    response_body = bytearray()
    body_sent = False

    async def receive():
        nonlocal body_sent
        if body_sent:
            return {"type": "http.disconnect"}
        body_sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    async def send(message):
        nonlocal status_code, response_headers
        if message["type"] == "http.response.start":
            status_code = message["status"]
            response_headers = [(k.decode(), v.decode()) for k, v in message.get("headers", [])]
        elif message["type"] == "http.response.body":
            response_body.extend(message.get("body", b""))

    await app(_build_scope(request, path), receive, send)

    info("Sending response", status_code=status_code, content_length=len(response_body))

    return Response(
        response=bytes(response_body),
        status=status_code,
        headers=response_headers,
    )


@functions_framework.http
def handle_request(request: Request) -> Response:
    """
    Cloud Function entry point that forwards requests to the FastAPI application.
    """
    return asyncio.run(forward_to_app(request))
