from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from fastapi.responses import JSONResponse

INVALID_INPUT = "Invalid input."


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


class ValidationNormalizeMiddleware:
    """Rewrite FastAPI 422 validation responses as 400 with a short error body.

    Tools report their own input errors as ``{"error": ...}``; this keeps
    framework-level validation failures in the same shape.
    """

    def __init__(self, app: Any, message: str = INVALID_INPUT) -> None:
        self.app = app
        self.message = message

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        status_code = 500
        headers: List[Tuple[bytes, bytes]] = []
        body_chunks: List[bytes] = []

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal status_code, headers
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
                headers = list(message.get("headers", []))
                return
            if message["type"] != "http.response.body":
                await send(message)
                return

            body_chunks.append(message.get("body", b"") or b"")
            if message.get("more_body"):
                return

            if status_code == 422:
                payload = json.dumps({"error": self.message}).encode("utf-8")
                headers = [
                    (key, value)
                    for key, value in headers
                    if key.lower() not in {b"content-length", b"content-type"}
                ]
                headers.append((b"content-type", b"application/json"))
                headers.append((b"content-length", str(len(payload)).encode("latin-1")))
                await send({"type": "http.response.start", "status": 400, "headers": headers})
                await send({"type": "http.response.body", "body": payload})
                return

            await send({"type": "http.response.start", "status": status_code, "headers": headers})
            await send({"type": "http.response.body", "body": b"".join(body_chunks)})

        await self.app(scope, receive, send_wrapper)
