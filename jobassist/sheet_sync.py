"""Mirror profile, job matches and applications into the tracking spreadsheet.

Placeholder for the Google Sheets integration: rows are kept in memory
and every call simulates the API round trip.
"""
from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import Callable

from jobassist.log import get_logger
from jobassist.models import JobPosting, Profile

log = get_logger(__name__)


class SheetSync:
    default_latencies = {"profile": 1.5, "matches": 1.5, "application": 1.0}

    def __init__(
        self,
        sheet_id: str = "",
        *,
        latencies: dict[str, float] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.sheet_id = sheet_id
        self.latencies = dict(self.default_latencies)
        if latencies is not None:
            self.latencies.update(latencies)
        self._sleep = sleep
        self._lock = threading.Lock()
        self.profile_row: dict | None = None
        self.match_rows: list[dict[str, str]] = []
        self.application_rows: list[dict[str, str]] = []

    def _wait(self, kind: str) -> None:
        latency = self.latencies.get(kind, 0.0)
        if latency > 0:
            self._sleep(latency)

    def sync_profile(self, profile: Profile) -> None:
        log.info("Syncing profile to sheet %s", self.sheet_id or "(unset)")
        self._wait("profile")
        with self._lock:
            self.profile_row = profile.to_dict()
        log.info("Profile sync completed")

    def sync_job_matches(self, postings: list[JobPosting]) -> None:
        log.info("Syncing %d job matches to sheet %s", len(postings), self.sheet_id or "(unset)")
        self._wait("matches")
        rows = [
            {
                "job_id": p.id,
                "title": p.title,
                "company": p.company,
                "location": p.location,
                "source": p.source.value,
                "category": p.category,
                "score": str(p.match_score),
                "url": p.url,
            }
            for p in postings
        ]
        with self._lock:
            known = {r["job_id"]: i for i, r in enumerate(self.match_rows)}
            for row in rows:
                if row["job_id"] in known:
                    self.match_rows[known[row["job_id"]]] = row
                else:
                    known[row["job_id"]] = len(self.match_rows)
                    self.match_rows.append(row)
        log.info("Job matches sync completed")

    def sync_job_application(
        self,
        posting: JobPosting,
        applied_at: datetime,
        resume_id: str | None = None,
        cover_letter_id: str | None = None,
    ) -> None:
        log.info("Syncing application for %s to sheet %s", posting.id, self.sheet_id or "(unset)")
        self._wait("application")
        row = {
            "job_id": posting.id,
            "title": posting.title,
            "company": posting.company,
            "applied_at": applied_at.strftime("%Y-%m-%d %H:%M"),
            "status": posting.status.value,
            "resume_id": resume_id or "",
            "cover_letter_id": cover_letter_id or "",
        }
        with self._lock:
            self.application_rows.append(row)
        log.debug("Tracked: %s @ %s [%s]", posting.title, posting.company, row["status"])
