# honeypot/app/middleware.py
"""Starlette / FastAPI middleware that rejects scanner probes before routing."""

from __future__ import annotations

from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from honeypot.checks.block_policy import HoneypotOptions
from honeypot.checks.engine import HoneypotEngine
from honeypot.core.config import settings


class HoneypotMiddleware(BaseHTTPMiddleware):
    """
    Block requests whose path matches a probe signature.

    Blocked requests get the configured status and an empty body; allowed
    requests reach the application untouched.

    Usage:
        app.add_middleware(HoneypotMiddleware, options=HoneypotOptions(status=403))

    Starlette builds middleware lazily, so pass a pre-built ``engine`` when a
    bad pattern should fail before the app starts serving.
    """

    def __init__(
        self,
        app: ASGIApp,
        options: HoneypotOptions | None = None,
        engine: HoneypotEngine | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__(app)

        if engine is None:
            if options is None:
                options = HoneypotOptions(**overrides) if overrides else settings.to_options()
            engine = HoneypotEngine(options)

        self.engine = engine

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # Decoded scope path; request.url cuts it at an encoded ? or #.
        decision = self.engine.inspect(request.scope["path"], request.method, request.headers)

        if decision.blocked:
            return Response(status_code=decision.status)

        return await call_next(request)
