"""Test helpers: record builders and an in-process fake engine."""

from aiohttp import web
from aiohttp.test_utils import TestServer

from image_lister.core.types import EngineConfig, ImageRecord

IMAGE_ID = "sha256:" + "0123456789abcdef" * 4
SHORT_ID = "0123456789ab"
OTHER_IMAGE_ID = "sha256:" + "fedcba9876543210" * 4
OTHER_SHORT_ID = "fedcba987654"
DIGEST = "sha256:" + "a1b2c3d4e5f60718" * 4


def make_record(
    repo_tags=None,
    repo_digests=None,
    image_id: str = IMAGE_ID,
    created: int = 0,
    size: int = 1048576,
) -> ImageRecord:
    """Build an image record with sensible defaults."""
    return ImageRecord(
        id=image_id,
        repo_tags=list(repo_tags or []),
        repo_digests=list(repo_digests or []),
        created=created,
        size=size,
    )


def api_image(record: ImageRecord) -> dict:
    """Render a record the way the engine's /images/json does."""
    return {
        "Id": record.id,
        "ParentId": "",
        "RepoTags": record.repo_tags,
        "RepoDigests": record.repo_digests,
        "Created": record.created,
        "Size": record.size,
        "VirtualSize": record.size,
        "Labels": None,
    }


class FakeEngine:
    """Minimal engine serving /images/json and /_ping."""

    def __init__(
        self, images=None, status: int = 200, message: str = "", body: str | None = None
    ):
        self.images = list(images or [])
        self.status = status
        self.message = message
        self.body = body
        self.requests: list[tuple[str, dict[str, str]]] = []

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/_ping", self.handle_ping)
        app.router.add_get("/images/json", self.handle_images)
        app.router.add_get("/{version}/images/json", self.handle_images)
        return app

    async def handle_ping(self, request: web.Request) -> web.Response:
        return web.Response(text="OK")

    async def handle_images(self, request: web.Request) -> web.Response:
        self.requests.append((request.path, dict(request.query)))
        if self.status != 200:
            return web.json_response({"message": self.message}, status=self.status)
        if self.body is not None:
            return web.Response(text=self.body, content_type="text/html")
        return web.json_response(self.images)


class EngineContext:
    """Context manager serving a fake engine for one test."""

    def __init__(self, engine: FakeEngine, api_version: str | None = None):
        self.engine = engine
        self.api_version = api_version
        self.server = TestServer(engine.make_app())

    @property
    def config(self) -> EngineConfig:
        return EngineConfig(
            url=f"http://{self.server.host}:{self.server.port}",
            timeout=10,
            api_version=self.api_version,
        )

    async def __aenter__(self):
        await self.server.start_server()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.server.close()
