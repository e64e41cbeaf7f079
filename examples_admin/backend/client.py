"""
HTTP client for the examples backend.

Wraps a shared ``httpx.AsyncClient`` with the credentials of one browser
session. A 401 from any call logs the session out before the error reaches
the caller. Nothing is retried.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from examples_admin.auth.credentials import Credentials
from examples_admin.auth.gate import AuthGate
from examples_admin.core.exceptions import (
    BackendRejectedException,
    BackendUnavailableException,
    SessionExpiredException,
)
from examples_admin.models.media import ImageType, Language, SpeakerMode
from examples_admin.schemas.audio import AudioAsset
from examples_admin.schemas.example import Category, ExampleAsset

logger = logging.getLogger(__name__)

CATEGORIES_PATH = "/admin/examples/categories"
EXAMPLES_LIST_PATH = "/admin/examples/list"
EXAMPLES_UPLOAD_PATH = "/admin/examples/upload"
EXAMPLES_DELETE_PATH = "/admin/examples/delete"
AUDIO_LIST_PATH = "/admin/examples/audio/list"
AUDIO_UPLOAD_PATH = "/admin/examples/audio/upload"
AUDIO_DELETE_PATH = "/admin/examples/audio/delete"


def build_delete_path(
    category: str,
    subcategory: str | None,
    image_type: ImageType,
    filename: str,
) -> str:
    """
    Deletion path for one example asset.

    ``category/subcategory/type/filename``, or ``category/type/filename``
    when the asset has no subcategory.
    """
    segments = [category]
    if subcategory:
        segments.append(subcategory)
    segments.extend([ImageType(image_type).value, filename])
    return "/".join(quote(segment, safe="") for segment in segments)


def build_audio_delete_path(speaker_mode: SpeakerMode, language: Language, filename: str) -> str:
    """Deletion path for one audio sample: ``speaker_mode/language/filename``."""
    segments = [SpeakerMode(speaker_mode).value, Language(language).value, filename]
    return "/".join(quote(segment, safe="") for segment in segments)


def error_detail(response: httpx.Response) -> Any:
    """The backend's ``detail`` field, falling back to the raw body."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and "detail" in payload:
        return payload["detail"]
    return payload


class BackendClient:
    """Examples backend operations for one browser session."""

    def __init__(self, http: httpx.AsyncClient, gate: AuthGate) -> None:
        self.http = http
        self.gate = gate

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self.http.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.warning(f"Backend unreachable on {method} {path}: {exc!r}")
            raise BackendUnavailableException() from exc

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send an authenticated request; a 401 expires the session."""
        headers = {**kwargs.pop("headers", {}), **self.gate.auth_headers()}
        response = await self._send(method, path, headers=headers, **kwargs)
        if response.status_code == 401:
            self.gate.expire()
            raise SessionExpiredException()
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str) -> None:
        if response.is_success:
            return
        detail = error_detail(response)
        logger.warning(f"{action} rejected by backend ({response.status_code}): {detail}")
        raise BackendRejectedException(action, detail, response.status_code)

    # ===================
    # Authentication
    # ===================

    async def probe_credentials(self, credentials: Credentials) -> int:
        """
        Call a protected listing endpoint with candidate credentials.

        Returns the HTTP status; the session's own state is not touched.
        """
        response = await self._send(
            "GET",
            CATEGORIES_PATH,
            headers={"Authorization": credentials.authorization_header()},
        )
        return response.status_code

    async def ping(self) -> int:
        """Unauthenticated reachability check; any HTTP answer counts."""
        response = await self._send("GET", CATEGORIES_PATH)
        return response.status_code

    # ===================
    # Categories and examples
    # ===================

    async def list_categories(self) -> list[Category]:
        response = await self._request("GET", CATEGORIES_PATH)
        self._raise_for_status(response, "Category listing")
        payload = _listing_payload(response, "Category listing")
        return [Category.model_validate(item) for item in payload.get("categories") or []]

    async def list_examples(self) -> list[ExampleAsset]:
        """Every stored before/after asset, across all categories."""
        response = await self._request("GET", EXAMPLES_LIST_PATH)
        self._raise_for_status(response, "Example listing")
        payload = _listing_payload(response, "Example listing")
        return _parse_items(payload.get("images") or [], ExampleAsset)

    async def upload_example(
        self,
        *,
        category: str,
        image_type: ImageType,
        filename: str,
        content: bytes,
        content_type: str | None = None,
        subcategory: str | None = None,
    ) -> Any:
        data = {"category": category, "image_type": ImageType(image_type).value}
        if subcategory:
            data["subcategory"] = subcategory
        files = {"file": (filename, content, content_type or "application/octet-stream")}

        response = await self._request("POST", EXAMPLES_UPLOAD_PATH, data=data, files=files)
        self._raise_for_status(response, "Upload")
        logger.info(f"Uploaded {ImageType(image_type).value} example '{filename}' to {category}/{subcategory or '-'}")
        return _json_or_none(response)

    async def delete_example(
        self,
        *,
        category: str,
        image_type: ImageType,
        filename: str,
        subcategory: str | None = None,
    ) -> Any:
        path = f"{EXAMPLES_DELETE_PATH}/{build_delete_path(category, subcategory, image_type, filename)}"
        response = await self._request("DELETE", path)
        self._raise_for_status(response, "Delete")
        logger.info(f"Deleted example {path}")
        return _json_or_none(response)

    # ===================
    # Audio
    # ===================

    async def list_audio(self) -> list[AudioAsset]:
        response = await self._request("GET", AUDIO_LIST_PATH)
        self._raise_for_status(response, "Audio listing")
        payload = _listing_payload(response, "Audio listing")
        return _parse_items(payload.get("audios") or [], AudioAsset)

    async def upload_audio(
        self,
        *,
        speaker_mode: SpeakerMode,
        language: Language,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> Any:
        data = {
            "speaker_mode": SpeakerMode(speaker_mode).value,
            "language": Language(language).value,
        }
        files = {"file": (filename, content, content_type or "application/octet-stream")}

        response = await self._request("POST", AUDIO_UPLOAD_PATH, data=data, files=files)
        self._raise_for_status(response, "Upload")
        logger.info(f"Uploaded audio '{filename}' to {data['speaker_mode']}/{data['language']}")
        return _json_or_none(response)

    async def delete_audio(
        self,
        *,
        speaker_mode: SpeakerMode,
        language: Language,
        filename: str,
    ) -> Any:
        path = f"{AUDIO_DELETE_PATH}/{build_audio_delete_path(speaker_mode, language, filename)}"
        response = await self._request("DELETE", path)
        self._raise_for_status(response, "Delete")
        logger.info(f"Deleted audio {path}")
        return _json_or_none(response)


def _listing_payload(response: httpx.Response, action: str) -> dict[str, Any]:
    """The JSON object of a successful listing; anything else is a backend error."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        logger.warning(f"{action} answered {response.status_code} without a JSON object")
        raise BackendRejectedException(action, "Malformed response from server", response.status_code)
    return payload


def _parse_items(items: list[Any], model: type) -> list:
    """Validate listing entries, skipping ones the backend sent malformed."""
    parsed = []
    for item in items:
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(f"Skipping malformed {model.__name__} entry: {exc.errors()[:1]}")
    return parsed


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
