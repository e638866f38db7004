from __future__ import annotations

from ..core.clients import TextGenerationClient
from ..core.config import settings
from ..core.credentials import CredentialStore, build_key_value_store
from ..core.lyrics import LyricsFetcher
from ..core.pipeline import SearchPipeline
from ..core.songs import SongIdentifier
from ..core.video import VideoTitleLookup

_CREDENTIALS: CredentialStore | None = None
_GENERATOR: TextGenerationClient | None = None
_PIPELINE: SearchPipeline | None = None
_VIDEO_LOOKUP: VideoTitleLookup | None = None


def get_credential_store() -> CredentialStore:
    global _CREDENTIALS
    if _CREDENTIALS is None:
        _CREDENTIALS = CredentialStore(
            build_key_value_store(settings.credential_backend, settings.redis_url),
            key=settings.credential_key,
            default=settings.xai_api_key,
        )
    return _CREDENTIALS


def get_pipeline() -> SearchPipeline:
    global _GENERATOR, _PIPELINE
    if _PIPELINE is None:
        _GENERATOR = TextGenerationClient(base_url=settings.xai_api_base_url, model=settings.xai_model)
        _PIPELINE = SearchPipeline(
            identifier=SongIdentifier(_GENERATOR),
            lyrics=LyricsFetcher(base_url=settings.lyrics_api_base_url),
            credentials=get_credential_store(),
        )
    return _PIPELINE


def get_video_lookup() -> VideoTitleLookup:
    global _VIDEO_LOOKUP
    if _VIDEO_LOOKUP is None:
        _VIDEO_LOOKUP = VideoTitleLookup(oembed_url=settings.oembed_url)
    return _VIDEO_LOOKUP


async def close_services() -> None:
    global _GENERATOR, _PIPELINE
    if _GENERATOR is not None:
        await _GENERATOR.aclose()
    _GENERATOR = None
    _PIPELINE = None
