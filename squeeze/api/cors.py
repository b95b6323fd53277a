"""
Cross-origin policy for the compress and download routes.
"""
import logging
from typing import Dict, Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Set up logging
logger = logging.getLogger(__name__)


class CrossOriginMiddleware(BaseHTTPMiddleware):
    """
    Attach a fixed set of CORS headers to responses for selected paths.

    A path matches when it equals an entry, or starts with it if the entry
    ends with ``/``. Pre-flight ``OPTIONS`` requests on matching paths are
    answered directly with an empty 200.
    """

    def __init__(self, app: ASGIApp, allow_origin: str, paths: Sequence[str]) -> None:
        super().__init__(app)
        self.paths = tuple(paths)
        self.headers: Dict[str, str] = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Allow-Credentials": "true",
            "Vary": "Origin",
        }

    def applies_to(self, path: str) -> bool:
        for prefix in self.paths:
            if path == prefix or (prefix.endswith("/") and path.startswith(prefix)):
                return True
        return False

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.applies_to(request.url.path):
            return await call_next(request)

        if request.method == "OPTIONS":
            logger.debug(f"Pre-flight request for {request.url.path}")
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        for name, value in self.headers.items():
            response.headers[name] = value
        return response
