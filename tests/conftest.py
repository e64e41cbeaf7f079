"""
Pytest configuration and fixtures for the Examples Admin Console tests.

The examples backend is replaced by a small in-memory FastAPI app served to
the console through ``httpx.ASGITransport``.
"""

import asyncio
import base64
import re
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI, File, Form, Header, HTTPException, Request, UploadFile
from httpx import AsyncClient, ASGITransport

from examples_admin.auth.dependencies import get_session_store
from examples_admin.auth.session import SessionStore
from examples_admin.config import Settings
from examples_admin.dependencies import get_http_client
from examples_admin.main import app

BACKEND_USERNAME = "admin"
BACKEND_PASSWORD = "secret"

CATEGORIES = [
    {"id": "comic-translation", "name": "Comic Translation", "description": "Translated pages"},
    {"id": "art-restoration", "name": "Art Restoration", "description": "Censor removal"},
    {"id": "colorization", "name": "Colorization", "description": "Flat category"},
    {"id": "video-subtitles", "name": "Video Subtitles", "description": "Subtitled clips"},
    {"id": "audio-story", "name": "Audio Story", "description": "Narrated samples"},
]

_NUMBER = re.compile(r"^(\d+)\.")
_BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class FakeExamplesBackend:
    """In-memory stand-in for the examples backend."""

    def __init__(self) -> None:
        self.username = BACKEND_USERNAME
        self.password = BACKEND_PASSWORD
        self.images: list[dict[str, Any]] = []
        self.audios: list[dict[str, Any]] = []
        self.categories_status = 200
        self.reject_uploads: str | None = None
        self.list_calls = 0
        self.audio_list_calls = 0
        self.deleted: list[str] = []
        self.holds: dict[str, asyncio.Event] = {}
        self.held: set[str] = set()
        self._clock = 0

    def hold(self, path: str) -> asyncio.Event:
        """Make the next call to *path* wait, before its auth check, until the returned event is set."""
        release = asyncio.Event()
        self.holds[path] = release
        return release

    async def wait_until_held(self, path: str) -> None:
        async def _held() -> None:
            while path not in self.held:
                await asyncio.sleep(0)

        await asyncio.wait_for(_held(), timeout=1)

    async def _maybe_hold(self, path: str) -> None:
        release = self.holds.pop(path, None)
        if release is not None:
            self.held.add(path)
            await release.wait()

    def tick(self) -> str:
        self._clock += 1
        return (_BASE_TIME + timedelta(minutes=self._clock)).isoformat()

    def add_image(
        self,
        category: str,
        image_type: str,
        filename: str,
        subcategory: str | None = None,
    ) -> dict[str, Any]:
        parts = [category] + ([subcategory] if subcategory else []) + [image_type, filename]
        key = "examples/" + "/".join(parts)
        entry = {
            "url": f"https://cdn.test/{key}",
            "filename": filename,
            "size": 1024,
            "lastModified": self.tick(),
            "key": key,
            "category": category,
            "subcategory": subcategory,
            "type": image_type,
        }
        self.images.append(entry)
        return entry

    def add_audio(self, speaker_mode: str, language: str, filename: str) -> dict[str, Any]:
        key = f"examples/audio-story/{speaker_mode}/{language}/{filename}"
        entry = {
            "key": key,
            "url": f"https://cdn.test/{key}",
            "size": 2048,
            "last_modified": self.tick(),
            "speaker_mode": speaker_mode,
            "language": language,
            "filename": filename,
        }
        self.audios.append(entry)
        return entry

    @staticmethod
    def next_number(entries: list[dict[str, Any]]) -> int:
        numbers = [int(m.group(1)) for e in entries if (m := _NUMBER.match(e["filename"]))]
        return max(numbers, default=0) + 1

    def build_app(self) -> FastAPI:
        backend = FastAPI()
        state = self

        async def check_auth(request: Request, authorization: str | None = Header(default=None)) -> None:
            await state._maybe_hold(request.url.path)
            expected = base64.b64encode(f"{state.username}:{state.password}".encode()).decode()
            if authorization != f"Basic {expected}":
                raise HTTPException(status_code=401, detail="Invalid credentials")

        @backend.get("/admin/examples/categories", dependencies=[Depends(check_auth)])
        async def categories():
            if state.categories_status != 200:
                raise HTTPException(status_code=state.categories_status, detail="Backend error")
            return {"categories": CATEGORIES}

        @backend.get("/admin/examples/list", dependencies=[Depends(check_auth)])
        async def list_images():
            state.list_calls += 1
            return {"images": list(state.images)}

        @backend.post("/admin/examples/upload", dependencies=[Depends(check_auth)])
        async def upload(
            file: UploadFile = File(...),
            category: str = Form(...),
            image_type: str = Form(...),
            subcategory: str | None = Form(default=None),
        ):
            if state.reject_uploads:
                raise HTTPException(status_code=400, detail=state.reject_uploads)
            same_slot = [
                e for e in state.images
                if e["category"] == category
                and e["subcategory"] == subcategory
                and e["type"] == image_type
            ]
            extension = file.filename.rsplit(".", 1)[-1]
            filename = f"{state.next_number(same_slot)}.{extension}"
            entry = state.add_image(category, image_type, filename, subcategory)
            return {"success": True, "filename": filename, "key": entry["key"]}

        @backend.delete("/admin/examples/delete/{path:path}", dependencies=[Depends(check_auth)])
        async def delete(path: str):
            segments = path.split("/")
            if len(segments) == 4:
                category, subcategory, image_type, filename = segments
            elif len(segments) == 3:
                category, image_type, filename = segments
                subcategory = None
            else:
                raise HTTPException(status_code=400, detail="Malformed path")
            for entry in state.images:
                if (
                    entry["category"] == category
                    and entry["subcategory"] == subcategory
                    and entry["type"] == image_type
                    and entry["filename"] == filename
                ):
                    state.images.remove(entry)
                    state.deleted.append(path)
                    return {"success": True}
            raise HTTPException(status_code=404, detail="Image not found")

        @backend.get("/admin/examples/audio/list", dependencies=[Depends(check_auth)])
        async def list_audio():
            state.audio_list_calls += 1
            return {"audios": list(state.audios), "total": len(state.audios), "cdn_base_url": "https://cdn.test"}

        @backend.post("/admin/examples/audio/upload", dependencies=[Depends(check_auth)])
        async def upload_audio(
            file: UploadFile = File(...),
            speaker_mode: str = Form(...),
            language: str = Form(...),
        ):
            if state.reject_uploads:
                raise HTTPException(status_code=400, detail=state.reject_uploads)
            same_group = [
                a for a in state.audios
                if a["speaker_mode"] == speaker_mode and a["language"] == language
            ]
            extension = file.filename.rsplit(".", 1)[-1]
            entry = state.add_audio(speaker_mode, language, f"{state.next_number(same_group)}.{extension}")
            return {"success": True, "filename": entry["filename"]}

        @backend.delete(
            "/admin/examples/audio/delete/{speaker_mode}/{language}/{filename}",
            dependencies=[Depends(check_auth)],
        )
        async def delete_audio(speaker_mode: str, language: str, filename: str):
            for entry in state.audios:
                if (
                    entry["speaker_mode"] == speaker_mode
                    and entry["language"] == language
                    and entry["filename"] == filename
                ):
                    state.audios.remove(entry)
                    return {"success": True}
            raise HTTPException(status_code=404, detail="Audio not found")

        return backend


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the default category layout."""
    return Settings(EXAMPLES_API_URL="http://backend")


@pytest.fixture
def fake_backend() -> FakeExamplesBackend:
    """Fresh in-memory examples backend."""
    return FakeExamplesBackend()


@pytest_asyncio.fixture(scope="function")
async def backend_http(fake_backend) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client the console uses to reach the fake backend."""
    transport = ASGITransport(app=fake_backend.build_app())
    async with AsyncClient(transport=transport, base_url="http://backend") as http:
        yield http


@pytest.fixture
def session_store() -> SessionStore:
    """Session registry shared by the console clients of one test."""
    return SessionStore()


@pytest_asyncio.fixture(scope="function")
async def client(backend_http, session_store) -> AsyncGenerator[AsyncClient, None]:
    """Browser-like client of the console, keeping its session cookie."""
    store = session_store

    app.dependency_overrides[get_http_client] = lambda: backend_http
    app.dependency_overrides[get_session_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def unreachable_client() -> AsyncGenerator[AsyncClient, None]:
    """Console client whose backend refuses every connection."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    store = SessionStore()
    backend_http = AsyncClient(transport=httpx.MockTransport(refuse), base_url="http://backend")

    app.dependency_overrides[get_http_client] = lambda: backend_http
    app.dependency_overrides[get_session_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    await backend_http.aclose()


@pytest_asyncio.fixture(scope="function")
async def logged_in_client(client: AsyncClient) -> AsyncClient:
    """Console client with an authenticated session."""
    response = await client.post(
        "/api/v1/session/login",
        json={"username": BACKEND_USERNAME, "password": BACKEND_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def sample_image() -> tuple[str, bytes, str]:
    """A small file as a browser would upload it."""
    return ("photo.png", b"\x89PNG fake image bytes", "image/png")
