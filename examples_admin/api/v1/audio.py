"""
Audio story endpoints.
"""

from fastapi import APIRouter, File, Form, Query, UploadFile

from examples_admin.dependencies import Audio
from examples_admin.models.media import Language, SpeakerMode
from examples_admin.schemas.audio import AudioCatalog

router = APIRouter()


@router.get("", response_model=AudioCatalog)
async def list_audio(
    service: Audio,
    speaker_mode: SpeakerMode = Query(default=SpeakerMode.SINGLE),
    language: Language = Query(default=Language.ENGLISH),
):
    """
    Audio samples of one (speaker mode, language) group in numbered slots.

    At least three slots are always returned, and ``next_ordinal`` names the
    number the next upload will get.
    """
    return await service.refresh(speaker_mode, language)


@router.post("", response_model=AudioCatalog, status_code=201)
async def upload_audio(
    service: Audio,
    file: UploadFile = File(..., description="Audio file"),
    speaker_mode: SpeakerMode = Form(...),
    language: Language = Form(...),
):
    """Upload one audio sample; the backend numbers it."""
    content = await file.read()
    return await service.upload(
        speaker_mode=speaker_mode,
        language=language,
        filename=file.filename,
        content=content,
        content_type=file.content_type,
    )


@router.delete("/{speaker_mode}/{language}/{filename}", response_model=AudioCatalog)
async def delete_audio(
    speaker_mode: SpeakerMode,
    language: Language,
    filename: str,
    service: Audio,
    confirm: bool = Query(default=False, description="Operator confirmed the deletion"),
):
    """Delete one audio sample."""
    return await service.delete(
        speaker_mode=speaker_mode,
        language=language,
        filename=filename,
        confirm=confirm,
    )
