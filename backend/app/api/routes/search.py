from __future__ import annotations

import logging

import redis
from fastapi import APIRouter, Depends, HTTPException

from ...core.credentials import CredentialStore
from ...core.models import (
    CredentialStatus,
    CredentialUpdate,
    SearchRequest,
    SearchResponse,
    SearchStatus,
    VideoResolveRequest,
    VideoResolveResponse,
)
from ...core.notifications import NotificationCollector
from ...core.pipeline import SearchPipeline
from ...core.video import VideoTitleLookup, embed_url, extract_video_id
from ..dependencies import get_credential_store, get_pipeline, get_video_lookup

router = APIRouter()

log = logging.getLogger("lyricsmv.api")

CREDENTIAL_STORE_DOWN = "credential store unavailable"


@router.get("/credential", response_model=CredentialStatus)
def get_credential(credentials: CredentialStore = Depends(get_credential_store)) -> CredentialStatus:
    try:
        return CredentialStatus(configured=credentials.is_configured())
    except redis.RedisError as exc:
        log.warning("credential read failed", extra={"error": str(exc)})
        raise HTTPException(status_code=503, detail=CREDENTIAL_STORE_DOWN) from exc


@router.put("/credential", response_model=CredentialStatus)
def update_credential(
    payload: CredentialUpdate,
    credentials: CredentialStore = Depends(get_credential_store),
) -> CredentialStatus:
    try:
        credentials.set(payload.api_key.strip())
        return CredentialStatus(configured=credentials.is_configured())
    except redis.RedisError as exc:
        log.warning("credential write failed", extra={"error": str(exc)})
        raise HTTPException(status_code=503, detail=CREDENTIAL_STORE_DOWN) from exc


@router.post("/videos/resolve", response_model=VideoResolveResponse)
async def resolve_video(
    payload: VideoResolveRequest,
    lookup: VideoTitleLookup = Depends(get_video_lookup),
) -> VideoResolveResponse:
    video_id = extract_video_id(payload.url)
    if video_id is None:
        raise HTTPException(status_code=400, detail="invalid YouTube URL")
    title = await lookup.fetch_title(payload.url)
    return VideoResolveResponse(video_id=video_id, embed_url=embed_url(video_id), title=title)


@router.post("/search", response_model=SearchResponse)
async def search(payload: SearchRequest, pipeline: SearchPipeline = Depends(get_pipeline)) -> SearchResponse:
    if not payload.title.strip():
        raise HTTPException(status_code=400, detail="no video loaded")
    if pipeline.busy:
        raise HTTPException(status_code=409, detail="search already in progress")

    collector = NotificationCollector()
    result = await pipeline.run(payload.title, credential=payload.api_key or None, notify=collector)
    return SearchResponse.from_result(result, collector.notifications)


@router.get("/search/status", response_model=SearchStatus)
def search_status(pipeline: SearchPipeline = Depends(get_pipeline)) -> SearchStatus:
    return SearchStatus(busy=pipeline.busy, stage=pipeline.stage)
