"""
Audio catalog reconciler.

Audio samples are numbered like examples, but grouped by speaker mode and
language instead of before/after.
"""

from collections.abc import Iterable

from examples_admin.models.media import Language, SpeakerMode
from examples_admin.schemas.audio import AudioAsset, AudioGroup, AudioSlot
from examples_admin.services.ordinals import recency_key, usable_ordinal

# Slots shown for a group even when it holds fewer samples.
MIN_AUDIO_SLOTS = 3

AUDIO_GROUPS: list[tuple[SpeakerMode, Language, str]] = [
    (SpeakerMode.SINGLE, Language.ENGLISH, "Single Speaker - English"),
    (SpeakerMode.SINGLE, Language.HINDI, "Single Speaker - Hindi"),
    (SpeakerMode.MULTI, Language.ENGLISH, "Multi Speaker - English"),
    (SpeakerMode.MULTI, Language.HINDI, "Multi Speaker - Hindi"),
]


def filter_group(
    audios: Iterable[AudioAsset],
    speaker_mode: SpeakerMode,
    language: Language,
) -> list[AudioAsset]:
    """
    Audio samples of one group, sorted strictly by ordinal.

    Samples without a usable ordinal sort last, by key.
    """
    members = [
        audio
        for audio in audios
        if audio.speaker_mode == speaker_mode and audio.language == language
    ]

    def sort_key(audio: AudioAsset) -> tuple[int, int, str]:
        ordinal = usable_ordinal(audio.filename)
        if ordinal is None:
            return 1, 0, audio.key
        return 0, ordinal, audio.key

    return sorted(members, key=sort_key)


def build_slots(group_audios: Iterable[AudioAsset]) -> tuple[list[AudioSlot], int]:
    """
    Lay a group's samples out in ordinal slots.

    Returns the slots ``1..max(highest ordinal, MIN_AUDIO_SLOTS)`` and the
    ordinal for the next upload. A slot claimed twice keeps the most recently
    modified sample.
    """
    by_ordinal: dict[int, AudioAsset] = {}
    for audio in group_audios:
        ordinal = usable_ordinal(audio.filename)
        if ordinal is None:
            continue
        current = by_ordinal.get(ordinal)
        if current is None or recency_key(audio.last_modified, audio.key) > recency_key(
            current.last_modified, current.key
        ):
            by_ordinal[ordinal] = audio

    highest = max(by_ordinal, default=0)
    slots = [
        AudioSlot(ordinal=ordinal, audio=by_ordinal.get(ordinal))
        for ordinal in range(1, max(highest, MIN_AUDIO_SLOTS) + 1)
    ]
    return slots, highest + 1


def summarize_groups(audios: Iterable[AudioAsset]) -> list[AudioGroup]:
    """Per-tab sample counts for every (speaker mode, language) combination."""
    audios = list(audios)
    return [
        AudioGroup(
            speaker_mode=speaker_mode,
            language=language,
            label=label,
            count=len(filter_group(audios, speaker_mode, language)),
        )
        for speaker_mode, language, label in AUDIO_GROUPS
    ]
