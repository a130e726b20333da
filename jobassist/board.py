"""The in-memory job board: the displayed job set and application tracking."""
from __future__ import annotations

import threading
from collections import Counter
from datetime import datetime, timezone
from typing import Callable, Iterable

from jobassist.contacts import ContactFinder
from jobassist.documents import DocumentGenerator
from jobassist.errors import DocumentGenerationError
from jobassist.log import get_logger
from jobassist.models import (
    ApplicationResult,
    DashboardStats,
    JobPosting,
    JobStatus,
    Profile,
    Source,
)
from jobassist.scorer import score_posting

log = get_logger(__name__)

SORT_KEYS = ("relevance", "date", "company")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobBoard:
    """Postings currently on display, keyed by id.

    Nothing is persisted; the board lives as long as the process. All
    mutation happens under one lock so a merge is atomic with respect to
    the "new jobs found" count it reports.
    """

    def __init__(self, postings: Iterable[JobPosting] = ()) -> None:
        self._lock = threading.RLock()
        self._postings: dict[str, JobPosting] = {}
        for p in postings:
            self._postings.setdefault(p.id, p)

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, posting_id: object) -> bool:
        return posting_id in self._postings

    def merge(self, postings: Iterable[JobPosting]) -> int:
        """Add postings not already on the board. Returns how many were new."""
        added = 0
        with self._lock:
            for p in postings:
                if p.id in self._postings:
                    continue
                self._postings[p.id] = p
                added += 1
        log.info("Merged scrape results: %d new job(s), %d on board", added, len(self._postings))
        return added

    def postings(self) -> list[JobPosting]:
        with self._lock:
            return list(self._postings.values())

    def get(self, posting_id: str) -> JobPosting | None:
        return self._postings.get(posting_id)

    def _require(self, posting_id: str) -> JobPosting:
        posting = self._postings.get(posting_id)
        if posting is None:
            raise KeyError(f"Unknown posting: {posting_id}")
        return posting

    def update_status(self, posting_id: str, status: JobStatus | str) -> JobPosting:
        """User-driven status change (interview, offer, rejected, ...)."""
        status = JobStatus(status)
        with self._lock:
            posting = self._require(posting_id)
            previous = posting.status
            posting.status = status
        log.debug("Updated %s: %s → %s", posting_id, previous.value, status.value)
        return posting

    def mark_viewed(self, posting_id: str) -> JobPosting:
        with self._lock:
            posting = self._require(posting_id)
            if posting.status is JobStatus.NEW:
                posting.status = JobStatus.VIEWED
        return posting

    def rescore(self, profile: Profile) -> None:
        """Recompute match scores after a profile edit."""
        with self._lock:
            for posting in self._postings.values():
                posting.match_score = score_posting(posting, profile)
        log.info("Re-scored %d postings", len(self._postings))

    def ensure_contacts(self, posting_id: str, finder: ContactFinder, max_contacts: int) -> JobPosting:
        """Look up contacts the first time a posting's details are opened."""
        posting = self._require(posting_id)
        if posting.contacts:
            return posting
        contacts = finder.find_contacts(posting, max_contacts)
        with self._lock:
            if not posting.contacts:
                posting.contacts = contacts
        return posting

    def apply(
        self,
        posting_id: str,
        profile: Profile,
        generator: DocumentGenerator,
        *,
        generate_cover: bool = True,
        sheet_sync=None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> ApplicationResult:
        """Generate documents and mark the posting applied.

        A ``DocumentGenerationError`` propagates and the posting keeps its
        current status, so the user can retry.
        """
        posting = self._require(posting_id)
        try:
            resume_id = generator.generate_resume(profile, posting)
            cover_id = generator.generate_cover_letter(profile, posting) if generate_cover else None
        except DocumentGenerationError as exc:
            log.error("Application for %s aborted: %s", posting_id, exc)
            raise

        applied_at = clock()
        with self._lock:
            posting.status = JobStatus.APPLIED
        log.info("Applied to %s @ %s", posting.title, posting.company)

        if sheet_sync is not None:
            try:
                sheet_sync.sync_job_application(posting, applied_at, resume_id, cover_id)
            except Exception as exc:
                log.warning("Sheet sync of application %s failed: %s", posting_id, exc)

        return ApplicationResult(
            posting_id=posting_id,
            resume_id=resume_id,
            cover_letter_id=cover_id,
            applied_at=applied_at,
        )

    def search(
        self,
        term: str = "",
        *,
        categories: Iterable[str] = (),
        sources: Iterable[Source | str] = (),
        statuses: Iterable[JobStatus | str] = (),
        sort_by: str = "relevance",
    ) -> list[JobPosting]:
        if sort_by not in SORT_KEYS:
            raise ValueError(f"sort_by must be one of {SORT_KEYS}, got {sort_by!r}")
        term = term.strip().lower()
        categories = set(categories)
        sources = {Source(s) for s in sources}
        statuses = {JobStatus(s) for s in statuses}

        def keep(p: JobPosting) -> bool:
            if term and not (
                term in p.title.lower()
                or term in p.company.lower()
                or term in p.description.lower()
            ):
                return False
            if categories and p.category not in categories:
                return False
            if sources and p.source not in sources:
                return False
            if statuses and p.status not in statuses:
                return False
            return True

        found = [p for p in self.postings() if keep(p)]
        if sort_by == "relevance":
            return sorted(found, key=lambda p: p.match_score, reverse=True)
        if sort_by == "date":
            return sorted(found, key=lambda p: p.posted_date, reverse=True)
        return sorted(found, key=lambda p: p.company.lower())

    def categories(self) -> list[str]:
        return list(dict.fromkeys(p.category for p in self.postings() if p.category))

    def stats(self) -> DashboardStats:
        postings = self.postings()
        statuses = Counter(p.status for p in postings)
        stats = DashboardStats(
            total_jobs=len(postings),
            new_jobs=statuses[JobStatus.NEW],
            applied_jobs=statuses[JobStatus.APPLIED],
            interviews=statuses[JobStatus.INTERVIEW],
            offers=statuses[JobStatus.OFFER],
        )
        for p in postings:
            stats.jobs_by_source[p.source.value] = stats.jobs_by_source.get(p.source.value, 0) + 1
            if p.category:
                stats.jobs_by_category[p.category] = stats.jobs_by_category.get(p.category, 0) + 1
        return stats
