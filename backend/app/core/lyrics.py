from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx
from pydantic import BaseModel

log = logging.getLogger("lyricsmv.lyrics")

# same unreserved set as JavaScript encodeURIComponent
_SEGMENT_SAFE = "!'()*~"


class LyricsPayload(BaseModel):
    lyrics: str | None = None


@dataclass(slots=True)
class LyricsFetcher:
    base_url: str
    http_client: httpx.AsyncClient | None = None

    def lyrics_url(self, artist: str, song: str) -> str:
        return f"{self.base_url.rstrip('/')}/{quote(artist, safe=_SEGMENT_SAFE)}/{quote(song, safe=_SEGMENT_SAFE)}"

    async def fetch(self, artist: str, song: str) -> str | None:
        url = self.lyrics_url(artist, song)
        try:
            response = await self._get(url)
            if not response.is_success:
                log.info("lyrics not found", extra={"artist": artist, "song": song, "status": response.status_code})
                return None
            payload = LyricsPayload.model_validate(response.json())
        except Exception as exc:  # noqa: BLE001
            log.warning("lyrics lookup failed", extra={"artist": artist, "song": song, "error": str(exc)})
            return None
        return payload.lyrics or None

    async def _get(self, url: str) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(url)
        async with httpx.AsyncClient() as client:
            return await client.get(url)
