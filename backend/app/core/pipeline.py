from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .credentials import CredentialStore
from .notifications import OUTCOME_NOTIFICATIONS, Notifier, log_notification
from .songs import SongIdentity
from .status import PipelineOutcome, PipelineStage

log = logging.getLogger("lyricsmv.pipeline")


class Identifier(Protocol):
    async def identify(self, title: str, credential: str) -> SongIdentity | None: ...


class LyricsSource(Protocol):
    async def fetch(self, artist: str, song: str) -> str | None: ...


@dataclass(frozen=True, slots=True)
class PipelineResult:
    lyrics: str | None = None
    trivia: str | None = None
    outcome: PipelineOutcome = PipelineOutcome.success

    @classmethod
    def empty(cls, outcome: PipelineOutcome) -> "PipelineResult":
        return cls(lyrics=None, trivia=None, outcome=outcome)


class SearchPipeline:
    """Title -> song identity (+ trivia) -> lyrics, one forward pass per run.

    Callers check ``busy`` before starting a run; the pipeline itself does not
    lock. ``stage`` reports which call an in-flight run is waiting on.
    """

    def __init__(
        self,
        identifier: Identifier,
        lyrics: LyricsSource,
        credentials: CredentialStore,
        notify: Notifier = log_notification,
    ) -> None:
        self.identifier = identifier
        self.lyrics = lyrics
        self.credentials = credentials
        self.notify = notify
        self.busy = False
        self.stage = PipelineStage.idle

    async def run(
        self,
        title: str,
        credential: str | None = None,
        notify: Notifier | None = None,
    ) -> PipelineResult:
        self.busy = True
        try:
            result = await self._search(title, credential)
        except Exception:  # noqa: BLE001
            log.exception("search pipeline crashed", extra={"title": title})
            result = PipelineResult.empty(PipelineOutcome.error)
        finally:
            self.busy = False
            self.stage = PipelineStage.idle
        return self._finish(result, notify or self.notify)

    async def _search(self, title: str, credential: str | None) -> PipelineResult:
        credential = credential or self.credentials.get()
        if not credential:
            return PipelineResult.empty(PipelineOutcome.no_credential)

        self._enter(PipelineStage.identifying)
        identity = await self.identifier.identify(title, credential)
        if identity is None:
            return PipelineResult.empty(PipelineOutcome.identification_failed)

        self._enter(PipelineStage.fetching_lyrics)
        lyrics = await self.lyrics.fetch(identity.artist, identity.song)
        if lyrics is None:
            return PipelineResult(lyrics=None, trivia=identity.trivia, outcome=PipelineOutcome.lyrics_failed)
        return PipelineResult(lyrics=lyrics, trivia=identity.trivia, outcome=PipelineOutcome.success)

    def _enter(self, stage: PipelineStage) -> None:
        self.stage = stage
        log.debug("pipeline stage", extra={"stage": stage.value})

    @staticmethod
    def _finish(result: PipelineResult, emit: Notifier) -> PipelineResult:
        log.info("search finished", extra={"outcome": result.outcome.value})
        try:
            emit(OUTCOME_NOTIFICATIONS[result.outcome])
        except Exception:  # noqa: BLE001
            log.exception("notifier failed", extra={"outcome": result.outcome.value})
        return result
