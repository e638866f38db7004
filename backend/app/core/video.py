from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import httpx
from pydantic import BaseModel

log = logging.getLogger("lyricsmv.video")

_VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)

EMBED_BASE_URL = "https://www.youtube.com/embed"


class OEmbedPayload(BaseModel):
    title: str | None = None


def extract_video_id(url: str) -> str | None:
    match = _VIDEO_ID_RE.search(url or "")
    return match.group(1) if match else None


def embed_url(video_id: str) -> str:
    return f"{EMBED_BASE_URL}/{video_id}"


@dataclass(slots=True)
class VideoTitleLookup:
    oembed_url: str
    http_client: httpx.AsyncClient | None = None

    async def fetch_title(self, url: str) -> str | None:
        params = {"url": url, "format": "json"}
        try:
            response = await self._get(params)
            if not response.is_success:
                log.info("oembed lookup rejected", extra={"url": url, "status": response.status_code})
                return None
            payload = OEmbedPayload.model_validate(response.json())
        except Exception as exc:  # noqa: BLE001
            log.warning("oembed lookup failed", extra={"url": url, "error": str(exc)})
            return None
        return payload.title or None

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(self.oembed_url, params=params)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await client.get(self.oembed_url, params=params)
