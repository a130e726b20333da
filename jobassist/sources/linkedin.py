"""LinkedIn job source — fixed sample listings in place of a live search."""
from __future__ import annotations

from datetime import datetime

from jobassist.models import JobPosting, JobStatus, Source
from jobassist.sources.base import JobSearchBase


class LinkedInSource(JobSearchBase):
    source = Source.LINKEDIN
    default_latency = 1.0

    def _search(self, keywords: list[str], now: datetime) -> list[JobPosting]:
        return [
            JobPosting(
                id="li-1",
                title="Project Manager - ESG Initiatives",
                company="Global Sustainability Corp",
                location="Remote, India",
                description="Looking for a Project Manager to lead our ESG compliance initiatives...",
                requirements=["Project management", "ESG knowledge", "Stakeholder engagement"],
                url="https://linkedin.com/jobs/view/li-1",
                source=self.source,
                posted_date=now,
                category="ESG/Climate",
                status=JobStatus.NEW,
            ),
            JobPosting(
                id="li-2",
                title="Operations Analyst",
                company="International Banking Group",
                location="Mumbai, India",
                description="Seeking an Operations Analyst to support our banking operations...",
                requirements=["Banking operations", "Data analysis", "Excel"],
                url="https://linkedin.com/jobs/view/li-2",
                source=self.source,
                posted_date=now,
                category="Operations",
                status=JobStatus.NEW,
            ),
        ]
