"""Naukrigulf job source — fixed sample listings in place of a live search."""
from __future__ import annotations

from datetime import datetime

from jobassist.models import JobPosting, JobStatus, Source
from jobassist.sources.base import JobSearchBase


class NaukrigulfSource(JobSearchBase):
    source = Source.NAUKRIGULF
    default_latency = 1.2

    def _search(self, keywords: list[str], now: datetime) -> list[JobPosting]:
        return [
            JobPosting(
                id="ng-1",
                title="Process Design Engineer",
                company="Engineering Solutions UAE",
                location="Dubai, UAE",
                description="Seeking a Process Design Engineer with chemical engineering background...",
                requirements=["Chemical engineering", "Process design", "Engineering"],
                url="https://naukrigulf.com/jobs/view/ng-1",
                source=self.source,
                posted_date=now,
                category="Engineering",
                status=JobStatus.NEW,
            ),
            JobPosting(
                id="ng-2",
                title="ESG Consultant",
                company="Global Consulting Firm",
                location="Remote",
                description="Looking for an ESG Consultant to help clients with sustainability initiatives...",
                requirements=["ESG", "Consulting", "Sustainability"],
                url="https://naukrigulf.com/jobs/view/ng-2",
                source=self.source,
                posted_date=now,
                category="ESG/Climate",
                status=JobStatus.NEW,
            ),
        ]
