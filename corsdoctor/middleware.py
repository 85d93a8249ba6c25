"""Interception hooks for WSGI and ASGI hosts.

Both wrap the point where the app hands its status and headers to the
server (``start_response`` / the ``http.response.start`` message). Headers
are final there and nothing has been written yet. The hooks only read;
status, headers and body pass through unchanged.
"""

from typing import Optional

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .doctor import CorsDoctor


def _environ_headers(environ: dict) -> list[tuple[str, str]]:
    headers = []
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            headers.append((key[5:].replace("_", "-").lower(), value))
    return headers


def _environ_url(environ: dict) -> str:
    url = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "") or "/"
    query = environ.get("QUERY_STRING")
    if query:
        url += "?" + query
    return url


def _status_code(status: str) -> int:
    return int(status.split(" ", 1)[0])


class CorsDoctorWSGI:
    """WSGI middleware: ``app = CorsDoctorWSGI(app, doctor)``."""

    def __init__(self, app, doctor: Optional[CorsDoctor] = None):
        self.app = app
        self.doctor = doctor or CorsDoctor()

    def __call__(self, environ, start_response):
        req_info = self.doctor.inspect_request(
            environ.get("REQUEST_METHOD"),
            _environ_url(environ),
            _environ_headers(environ),
        )
        if req_info is None:
            return self.app(environ, start_response)

        analyzed = False

        def start_response_with_audit(status, response_headers, exc_info=None):
            nonlocal analyzed
            if not analyzed:
                analyzed = True
                self.doctor.audit_response(req_info, response_headers, _status_code(status))
            if exc_info is None:
                return start_response(status, response_headers)
            return start_response(status, response_headers, exc_info)

        return self.app(environ, start_response_with_audit)


class CorsDoctorMiddleware:
    """Pure ASGI middleware: ``app.add_middleware(CorsDoctorMiddleware, doctor=doctor)``.

    Does not buffer the body; it only reads the ``http.response.start`` message.
    """

    def __init__(self, app: ASGIApp, doctor: Optional[CorsDoctor] = None):
        self.app = app
        self.doctor = doctor or CorsDoctor()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        url = scope.get("root_path", "") + scope.get("path", "") or "/"
        if scope.get("query_string"):
            url += "?" + scope["query_string"].decode("latin-1")
        req_info = self.doctor.inspect_request(scope.get("method"), url, Headers(scope=scope))
        if req_info is None:
            await self.app(scope, receive, send)
            return

        async def send_with_audit(message: Message) -> None:
            if message["type"] == "http.response.start":
                self.doctor.audit_response(
                    req_info,
                    message.get("headers", []),
                    message["status"],
                )
            await send(message)

        await self.app(scope, receive, send_with_audit)
