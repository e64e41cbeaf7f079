"""
Audio service - audio story samples grouped by speaker mode and language.
"""

from collections.abc import Iterable
from datetime import datetime, timezone

from examples_admin.backend.client import BackendClient
from examples_admin.config import Settings
from examples_admin.core.exceptions import ConfirmationRequiredException
from examples_admin.models.media import Language, MediaKind, SpeakerMode
from examples_admin.schemas.audio import AudioAsset, AudioCatalog
from examples_admin.services.audio_catalog import build_slots, filter_group, summarize_groups
from examples_admin.services.uploads import validate_upload
from examples_admin.services.views import ListingView


def build_catalog(
    audios: Iterable[AudioAsset],
    speaker_mode: SpeakerMode,
    language: Language,
    fetched_at: datetime | None = None,
) -> AudioCatalog:
    audios = list(audios)
    group = filter_group(audios, speaker_mode, language)
    slots, next_ordinal = build_slots(group)
    return AudioCatalog(
        speaker_mode=speaker_mode,
        language=language,
        groups=summarize_groups(audios),
        slots=slots,
        next_ordinal=next_ordinal,
        total=len(group),
        fetched_at=fetched_at or datetime.now(timezone.utc),
    )


class AudioService:
    """Service class for audio sample operations."""

    def __init__(
        self,
        backend: BackendClient,
        view: ListingView[AudioCatalog],
        settings: Settings,
    ):
        self.backend = backend
        self.view = view
        self.settings = settings

    async def refresh(
        self,
        speaker_mode: SpeakerMode = SpeakerMode.SINGLE,
        language: Language = Language.ENGLISH,
    ) -> AudioCatalog:
        generation = self.view.select(speaker_mode, language)
        audios = await self.backend.list_audio()
        catalog = build_catalog(audios, speaker_mode, language)
        catalog.generation = generation
        catalog.current = self.view.commit(generation, catalog)
        return catalog

    async def upload(
        self,
        *,
        speaker_mode: SpeakerMode,
        language: Language,
        filename: str | None,
        content: bytes,
        content_type: str | None = None,
    ) -> AudioCatalog:
        validate_upload(content, filename, content_type, MediaKind.AUDIO, self.settings)
        await self.backend.upload_audio(
            speaker_mode=speaker_mode,
            language=language,
            filename=filename,
            content=content,
            content_type=content_type,
        )
        return await self.refresh(speaker_mode, language)

    async def delete(
        self,
        *,
        speaker_mode: SpeakerMode,
        language: Language,
        filename: str,
        confirm: bool = False,
    ) -> AudioCatalog:
        if not confirm:
            raise ConfirmationRequiredException(filename)
        await self.backend.delete_audio(
            speaker_mode=speaker_mode,
            language=language,
            filename=filename,
        )
        return await self.refresh(speaker_mode, language)
