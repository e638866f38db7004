from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol

log = logging.getLogger("lyricsmv.songs")

SONG_PREFIX = "**Song:** "
ARTIST_PREFIX = "**Artist:** "

IDENTIFY_SYSTEM_PROMPT = "You are a system that identifies songs and artists from YouTube video titles."
TRIVIA_SYSTEM_PROMPT = "You are a system that provides trivia about songs."


class TextGenerator(Protocol):
    async def complete(self, system_prompt: str, user_prompt: str, credential: str) -> str: ...


@dataclass(frozen=True, slots=True)
class SongIdentity:
    artist: str
    song: str
    trivia: str | None = None


def identify_prompt(title: str) -> str:
    return f"Extract the song and artist from the YouTube title: {title}"


def trivia_prompt(song: str, artist: str) -> str:
    return (
        f'I need a paragraph of trivia about the song "{song}" by {artist}. '
        "I'm interested in learning something I probably wouldn't already know. "
        "Focus on details like: The song's writing or composition process, "
        "any interesting stories from the recording sessions, "
        "the song's chart performance or cultural impact beyond just 'it was a hit,' "
        "and any unusual or surprising facts about the song's creation or reception. "
        "Avoid generic information like 'it was a popular song.'"
    )


def parse_song_identity(content: str) -> SongIdentity | None:
    """Read ``**Song:** ...`` from line 0 and ``**Artist:** ...`` from line 1.

    The labels must appear exactly as written at the start of their line.
    Returns None when either field ends up empty.
    """
    lines = content.split("\n")
    song = _strip_label(lines[0] if len(lines) > 0 else "", SONG_PREFIX)
    artist = _strip_label(lines[1] if len(lines) > 1 else "", ARTIST_PREFIX)
    if not song or not artist:
        return None
    return SongIdentity(artist=artist, song=song)


def _strip_label(line: str, prefix: str) -> str:
    return line.removeprefix(prefix).strip()


@dataclass(slots=True)
class SongIdentifier:
    generator: TextGenerator

    async def identify(self, title: str, credential: str) -> SongIdentity | None:
        try:
            content = await self.generator.complete(IDENTIFY_SYSTEM_PROMPT, identify_prompt(title), credential)
        except Exception as exc:  # noqa: BLE001
            log.warning("song identification failed", extra={"title": title, "error": str(exc)})
            return None

        identity = parse_song_identity(content)
        if identity is None:
            log.info("song identity unresolved", extra={"title": title})
            return None

        trivia = await self.fetch_trivia(identity.song, identity.artist, credential)
        return replace(identity, trivia=trivia)

    async def fetch_trivia(self, song: str, artist: str, credential: str) -> str | None:
        try:
            trivia = await self.generator.complete(TRIVIA_SYSTEM_PROMPT, trivia_prompt(song, artist), credential)
        except Exception as exc:  # noqa: BLE001
            log.warning("trivia request failed", extra={"song": song, "artist": artist, "error": str(exc)})
            return None
        return trivia or None
