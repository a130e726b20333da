"""
Job acquisition: keyword extraction, fail-soft fetch across sources, and
the periodic scraper service.

Runs: keywords → fetch (LinkedIn, Naukrigulf) → score/rank → merge into board → sheet sync.
"""
from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from jobassist.config import Settings
from jobassist.errors import SourceFetchError
from jobassist.log import get_logger
from jobassist.models import JobPosting, Profile, ScraperStatus
from jobassist.scorer import rank_postings
from jobassist.sources import JobSearchBase, get_sources

log = get_logger(__name__)

MAX_SKILL_KEYWORDS = 10

ResultSink = Callable[[list[JobPosting]], Any]  # may return the count of new postings
TimerFactory = Callable[[float, Callable[[], None]], Any]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ScrapeResult:
    postings: list[JobPosting]
    new_jobs: int = 0


def extract_keywords(profile: Profile) -> list[str]:
    """Preferred roles, the first 10 skills, then every experience title.

    Blank entries are dropped; exact duplicates are removed keeping the
    first occurrence.
    """
    keywords: list[str] = []
    keywords.extend(profile.job_preferences.roles)
    keywords.extend(profile.skills[:MAX_SKILL_KEYWORDS])
    keywords.extend(exp.title for exp in profile.experience)
    return list(dict.fromkeys(k for k in keywords if k and k.strip()))


def fetch_from_source(source: JobSearchBase, keywords: list[str]) -> list[JobPosting]:
    try:
        results = source.fetch(keywords)
    except Exception as exc:
        raise SourceFetchError(source.name, exc) from exc
    log.info("[%s] returned %d jobs", source.name, len(results))
    return results


def _fetch_soft(source: JobSearchBase, keywords: list[str]) -> list[JobPosting]:
    try:
        return fetch_from_source(source, keywords)
    except SourceFetchError as exc:
        log.error("[%s] FAILED: %s", exc.source, exc.cause)
        return []


def acquire(
    profile: Profile,
    sources: list[JobSearchBase] | None = None,
    *,
    parallel: bool = True,
) -> list[JobPosting]:
    """Fetch from every source, concatenate in source order, score and rank.

    A failing source contributes nothing; the others still count.
    """
    sources = get_sources() if sources is None else sources
    keywords = extract_keywords(profile)
    log.info("Scraping jobs for %s using %d keyword(s)", profile.name, len(keywords))

    if parallel and len(sources) > 1:
        # map() yields in submission order regardless of completion order
        with ThreadPoolExecutor(max_workers=len(sources)) as pool:
            batches = list(pool.map(lambda s: _fetch_soft(s, keywords), sources))
    else:
        batches = [_fetch_soft(s, keywords) for s in sources]

    combined = [posting for batch in batches for posting in batch]
    ranked = rank_postings(combined, profile)
    log.info("Found %d matching jobs", len(ranked))
    return ranked


class JobScraperService:
    """Periodic job acquisition with a start/stop lifecycle.

    Owned by the application context rather than living as a module
    global. A trigger that arrives while a scrape is in flight joins that
    scrape and receives its result (coalescing) instead of starting a
    second one.
    """

    def __init__(
        self,
        sources: list[JobSearchBase] | None = None,
        *,
        settings: Settings | None = None,
        interval_seconds: float | None = None,
        on_results: ResultSink | None = None,
        sheet_sync: Any = None,
        clock: Callable[[], datetime] = _utcnow,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        settings = settings or Settings()
        self.sources = get_sources(settings) if sources is None else sources
        self.interval = timedelta(
            seconds=interval_seconds if interval_seconds is not None else settings.scrape_interval_seconds
        )
        if self.interval.total_seconds() <= 0:
            raise ValueError("Scrape interval must be positive")
        self.parallel = settings.parallel_fetch
        self.on_results = on_results
        self.sheet_sync = sheet_sync
        self._clock = clock
        self._timer_factory = timer_factory

        self._lock = threading.Lock()
        self._running = False
        self._generation = 0
        self._timer: Any = None
        self._profile: Profile | None = None
        self._last_run_time: datetime | None = None
        self._inflight: Future | None = None

    # ── lifecycle ─────────────────────────────────────────────────────

    def start(self, profile: Profile) -> bool:
        """Scrape now, then every interval. No-op if already running."""
        with self._lock:
            if self._running:
                log.info("Job scraper is already running")
                return False
            self._running = True
            self._generation += 1
            self._profile = profile
            self._arm(0.0, self._generation)
        log.info("Starting job scraper (every %.1f h)", self.interval.total_seconds() / 3600)
        return True

    def stop(self) -> bool:
        """Cancel the pending timer. In-flight scrapes still finish."""
        with self._lock:
            if not self._running:
                log.info("Job scraper is not running")
                return False
            self._running = False
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        log.info("Stopping job scraper")
        return True

    @property
    def is_running(self) -> bool:
        return self._running

    def update_profile(self, profile: Profile) -> None:
        """Subsequent timer ticks use *profile*."""
        with self._lock:
            self._profile = profile

    def get_status(self) -> ScraperStatus:
        with self._lock:
            next_run = None
            if self._running and self._last_run_time is not None:
                next_run = self._last_run_time + self.interval
            return ScraperStatus(
                is_running=self._running,
                last_run_time=self._last_run_time,
                next_run_time=next_run,
            )

    # ── scraping ──────────────────────────────────────────────────────

    def trigger_now(self, profile: Profile) -> list[JobPosting]:
        """Scrape immediately, independent of the timer schedule."""
        return self.scrape_now(profile).postings

    manual_scrape = trigger_now

    def scrape_now(self, profile: Profile) -> ScrapeResult:
        """Like ``trigger_now`` but also reports how many postings the
        result sink accepted as new, counted by the merge itself.
        """
        with self._lock:
            inflight = self._inflight
            owner = inflight is None
            if owner:
                inflight = self._inflight = Future()

        if not owner:
            log.info("Scrape already in progress; waiting for its results")
            return inflight.result()

        try:
            result = self._run(profile)
        except BaseException as exc:
            with self._lock:
                self._inflight = None
            inflight.set_exception(exc)
            raise
        with self._lock:
            self._inflight = None
        inflight.set_result(result)
        return result

    def _run(self, profile: Profile) -> ScrapeResult:
        with self._lock:
            self._last_run_time = self._clock()
        postings = acquire(profile, self.sources, parallel=self.parallel)
        return ScrapeResult(postings, self._deliver(postings))

    def _deliver(self, postings: list[JobPosting]) -> int:
        added = 0
        if self.on_results is not None:
            try:
                count = self.on_results(postings)
            except Exception as exc:
                log.error("Merging scrape results failed: %s", exc)
            else:
                added = count if isinstance(count, int) else 0
        if self.sheet_sync is not None:
            try:
                self.sheet_sync.sync_job_matches(postings)
            except Exception as exc:
                log.warning("Sheet sync of job matches failed: %s", exc)
        return added

    # ── timer ─────────────────────────────────────────────────────────

    def _arm(self, delay: float, generation: int) -> None:
        # caller holds self._lock
        timer = self._timer_factory(delay, lambda: self._tick(generation))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            profile = self._profile
            # Re-arm first so the period does not drift with scrape duration.
            self._arm(self.interval.total_seconds(), generation)
        try:
            self.trigger_now(profile)
        except Exception:
            log.exception("Scheduled scrape failed")
