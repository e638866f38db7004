from __future__ import annotations

from pydantic import BaseModel, Field

from .notifications import Notification, Severity
from .pipeline import PipelineResult
from .status import PipelineOutcome, PipelineStage


class SearchRequest(BaseModel):
    title: str = ""
    api_key: str | None = None


class NotificationModel(BaseModel):
    title: str
    description: str
    severity: Severity = Severity.default

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationModel":
        return cls(
            title=notification.title,
            description=notification.description,
            severity=notification.severity,
        )


class SearchResponse(BaseModel):
    outcome: PipelineOutcome
    lyrics: str | None = None
    trivia: str | None = None
    notifications: list[NotificationModel] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: PipelineResult, notifications: list[Notification]) -> "SearchResponse":
        return cls(
            outcome=result.outcome,
            lyrics=result.lyrics,
            trivia=result.trivia,
            notifications=[NotificationModel.from_notification(item) for item in notifications],
        )


class SearchStatus(BaseModel):
    busy: bool
    stage: PipelineStage


class CredentialUpdate(BaseModel):
    api_key: str = Field(..., min_length=1)


class CredentialStatus(BaseModel):
    configured: bool


class VideoResolveRequest(BaseModel):
    url: str = Field(..., min_length=1)


class VideoResolveResponse(BaseModel):
    video_id: str
    embed_url: str
    title: str | None = None
