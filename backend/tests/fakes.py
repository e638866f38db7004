from __future__ import annotations

from backend.app.core.songs import SongIdentity


class ScriptedGenerator:
    """Replays canned completions (or raises them when they are exceptions)."""

    def __init__(self, *responses: str | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str, credential: str) -> str:
        self.calls.append((system_prompt, user_prompt, credential))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class StubIdentifier:
    def __init__(self, identity: SongIdentity | None = None, error: Exception | None = None) -> None:
        self.identity = identity
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def identify(self, title: str, credential: str) -> SongIdentity | None:
        self.calls.append((title, credential))
        if self.error is not None:
            raise self.error
        return self.identity


class StubLyrics:
    def __init__(self, lyrics: str | None = None) -> None:
        self.lyrics = lyrics
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, artist: str, song: str) -> str | None:
        self.calls.append((artist, song))
        return self.lyrics
