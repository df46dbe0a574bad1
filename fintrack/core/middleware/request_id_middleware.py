import uuid
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

REQUEST_ID_TOKEN_HEADER = "x-request-id"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with an ID (the caller's, or a new UUID4) and echoes it back."""

    def __init__(self, app: ASGIApp, header_name: str = REQUEST_ID_TOKEN_HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.request_id = request.headers.get(self.header_name) or uuid.uuid4().hex

        response = await call_next(request)
        response.headers[self.header_name] = request.state.request_id
        return response
