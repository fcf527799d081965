"""
Static file serving: cache headers and selective gzip.
"""

import mimetypes
from pathlib import PurePosixPath

from starlette.datastructures import MutableHeaders
from starlette.middleware.gzip import GZipMiddleware
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

# Text-like payloads where gzip gives real savings.
COMPRESSIBLE_EXTENSIONS = {".html", ".htm", ".css", ".js", ".mjs", ".json", ".map", ".svg", ".txt"}
# Already compressed or binary formats.
PRECOMPRESSED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".gif", ".ico", ".woff", ".woff2"}


def register_mime_types() -> None:
    """Make sure module scripts and fonts get the right Content-Type."""
    mimetypes.add_type("text/javascript", ".mjs")
    mimetypes.add_type("font/woff2", ".woff2")
    mimetypes.add_type("font/woff", ".woff")


def set_cache_headers(headers: MutableHeaders, cache_seconds: int) -> None:
    """Long-lived public caching, or no caching at all when ``cache_seconds`` <= 0."""
    if cache_seconds <= 0:
        headers["Cache-Control"] = "no-store, must-revalidate"
        headers["Pragma"] = "no-cache"
        headers["Expires"] = "0"
    else:
        headers["Cache-Control"] = f"public, max-age={cache_seconds}"


def is_compressible_path(path: str) -> bool:
    """True for text payloads; routes without an extension are likely HTML."""
    ext = PurePosixPath(path).suffix.lower()
    if ext in COMPRESSIBLE_EXTENSIONS:
        return True
    if ext in PRECOMPRESSED_EXTENSIONS:
        return False
    return ext == ""


class CachedStaticFiles(StaticFiles):
    """StaticFiles with a fixed Cache-Control policy."""

    def __init__(self, *args, cache_seconds: int = 0, **kwargs):
        super().__init__(*args, **kwargs)
        self.cache_seconds = cache_seconds

    async def get_response(self, path: str, scope: Scope):
        response = await super().get_response(path, scope)
        set_cache_headers(response.headers, self.cache_seconds)
        return response


class SelectiveGZipMiddleware:
    """Gzip text responses only; HEAD requests and binary assets pass through."""

    def __init__(self, app: ASGIApp, minimum_size: int = 500):
        self.app = app
        self.gzip = GZipMiddleware(app, minimum_size=minimum_size)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] == "http"
            and scope.get("method") != "HEAD"
            and is_compressible_path(scope.get("path", ""))
        ):
            await self.gzip(scope, receive, send)
            return
        await self.app(scope, receive, send)
