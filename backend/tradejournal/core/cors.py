"""
Cross-origin access control.

Single allowed origin from settings. Preflight responses carry no body.
Preflights for the analysis endpoint get the same headers as its POST replies.
"""

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from tradejournal.core.config import Settings

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type", "x-user-id"]
CORS_ALLOW_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
ANALYSIS_ALLOW_METHODS = ["POST", "OPTIONS"]
ANALYSIS_PATH = "/api/v1/analyze-trades"


def analysis_cors_headers(settings: Settings) -> dict[str, str]:
    """Headers sent on analysis responses, including OPTIONS replies."""
    return {
        "Access-Control-Allow-Origin": settings.allowed_origin,
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
        "Access-Control-Allow-Methods": ", ".join(ANALYSIS_ALLOW_METHODS),
    }


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware whose preflight replies have an empty body.

    Paths listed in path_headers answer preflights with their own fixed
    headers instead of the app-wide ones.
    """

    def __init__(self, app: ASGIApp, path_headers: dict[str, dict[str, str]] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.path_headers = path_headers or {}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] == "http"
            and scope["method"] == "OPTIONS"
            and scope["path"] in self.path_headers
        ):
            headers = Headers(scope=scope)
            if "origin" in headers and "access-control-request-method" in headers:
                response = Response(headers=self.path_headers[scope["path"]])
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=response.status_code, headers=headers)
