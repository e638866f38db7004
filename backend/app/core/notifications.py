from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .status import PipelineOutcome

log = logging.getLogger("lyricsmv.notifications")


class Severity(str, Enum):
    default = "default"
    destructive = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    description: str
    severity: Severity = Severity.default


Notifier = Callable[[Notification], None]


OUTCOME_NOTIFICATIONS: dict[PipelineOutcome, Notification] = {
    PipelineOutcome.no_credential: Notification(
        title="API Key Required",
        description="Please enter your X.AI API key to enable song information extraction",
        severity=Severity.destructive,
    ),
    PipelineOutcome.identification_failed: Notification(
        title="Could not extract song information",
        description="Please check if the video title contains song information",
        severity=Severity.destructive,
    ),
    PipelineOutcome.lyrics_failed: Notification(
        title="Error fetching lyrics",
        description="Could not fetch the lyrics for this song",
        severity=Severity.destructive,
    ),
    PipelineOutcome.success: Notification(
        title="Success",
        description="Found lyrics and trivia for the song!",
    ),
    PipelineOutcome.error: Notification(
        title="Error",
        description="An error occurred while fetching song information",
        severity=Severity.destructive,
    ),
}


def log_notification(notification: Notification) -> None:
    level = logging.WARNING if notification.severity is Severity.destructive else logging.INFO
    log.log(level, "notification", extra={"title": notification.title, "severity": notification.severity.value})


class NotificationCollector:
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)
