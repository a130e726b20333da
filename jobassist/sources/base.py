from __future__ import annotations

import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable

from jobassist.log import get_logger
from jobassist.models import JobPosting, Source

log = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobSearchBase(ABC):
    """One job board. Subclasses return postings for a keyword list.

    ``latency`` simulates the round trip of a real board; a networked
    implementation would drop it and do its I/O in ``_search``.
    """

    source: Source
    default_latency: float = 1.0

    def __init__(
        self,
        latency: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.latency = self.default_latency if latency is None else latency
        self._sleep = sleep
        self._clock = clock

    @property
    def name(self) -> str:
        return self.source.value

    def fetch(self, keywords: list[str]) -> list[JobPosting]:
        log.info("Searching %s for %d keyword(s)", self.name, len(keywords))
        if self.latency > 0:
            self._sleep(self.latency)
        return self._search(keywords, self._clock())

    @abstractmethod
    def _search(self, keywords: list[str], now: datetime) -> list[JobPosting]:
        pass
