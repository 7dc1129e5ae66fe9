# COMPONENT: API REQUEST / RESPONSE LOGGING MIDDLEWARE
# REQUIREMENTS SATISFIED: request tracing and debugging support
"""
task_api/api/middleware/log_requests.py

Defines a custom ASGI middleware for HTTP request and response logging.

This middleware wraps the receive/send channels of each HTTP request to
capture the request body, the response status and body, and end-to-end
latency. Each request is tagged with a short request ID so the lines of one
exchange can be grouped in the log.

What gets logged:
    - INFO:  one summary line (method, path, status, latency)
    - DEBUG: request and response bodies, pretty-printed when they are JSON

Non-HTTP ASGI events (lifespan, websockets) are passed through untouched.
The middleware never changes the request or the response.
"""
import json
import uuid
import time
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ...utils.logging import get_logger

logger = get_logger("requests")


def _render_body(raw: bytes) -> str:
    text = raw.decode("utf-8", errors="replace")
    if not text:
        return "<empty>"
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except ValueError:
        return text


class DeepASGILogger:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        rid = str(uuid.uuid4())[:8]
        method = scope.get("method")
        path = scope.get("path")

        body_bytes = b""

        async def recv_wrapper() -> Message:
            nonlocal body_bytes
            msg = await receive()
            if msg["type"] == "http.request":
                body_bytes += msg.get("body", b"")
            return msg

        resp_body = b""
        status_code = None

        async def send_wrapper(message: Message):
            nonlocal resp_body, status_code

            if message["type"] == "http.response.start":
                status_code = message["status"]

            if message["type"] == "http.response.body":
                resp_body += message.get("body", b"")

            await send(message)

        start = time.time()
        try:
            await self.app(scope, recv_wrapper, send_wrapper)
        finally:
            duration_ms = round((time.time() - start) * 1000, 2)
            logger.info("[RID %s] %s %s -> %s (%s ms)", rid, method, path, status_code, duration_ms)
            logger.debug("[RID %s] Request Body: %s", rid, _render_body(body_bytes))
            logger.debug("[RID %s] Response Body: %s", rid, _render_body(resp_body))
