"""
Pydantic schemas for audio story samples.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from examples_admin.models.media import Language, SpeakerMode


class AudioAsset(BaseModel):
    """One stored audio sample."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    url: str
    size: int = 0
    last_modified: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("last_modified", "lastModified"),
    )
    speaker_mode: SpeakerMode
    language: Language
    filename: str


class AudioSlot(BaseModel):
    """A numbered display slot, empty when no sample carries that ordinal."""

    ordinal: int
    audio: AudioAsset | None = None


class AudioGroup(BaseModel):
    """Summary of one (speaker mode, language) tab."""

    speaker_mode: SpeakerMode
    language: Language
    label: str
    count: int


class AudioCatalog(BaseModel):
    """Audio samples for the selected group, laid out in ordinal slots."""

    speaker_mode: SpeakerMode
    language: Language
    groups: list[AudioGroup]
    slots: list[AudioSlot]
    next_ordinal: int
    total: int
    fetched_at: datetime
    generation: int = 0
    current: bool = True
