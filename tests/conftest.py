"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("JOBASSIST_NO_LOG_FILE", "1")

from datetime import datetime, timezone

import pytest

from jobassist.models import (
    Experience,
    JobPosting,
    JobPreferences,
    Profile,
    Source,
)


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function()


@pytest.fixture
def timers():
    """Timer factory that records every timer it creates."""
    created = []

    def factory(interval, function):
        timer = FakeTimer(interval, function)
        created.append(timer)
        return timer

    factory.created = created
    return factory


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 4, 18, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def profile() -> Profile:
    return Profile(
        name="Test Candidate",
        email="candidate@example.com",
        skills=["ESG", "Excel", "Data Analysis", "Process Design", "Jira"],
        experience=[
            Experience(
                title="Project Coordinator",
                company="Global Sustainability Initiative",
                start_date="2023-01",
            ),
            Experience(
                title="Operations Analyst",
                company="National Banking Corporation",
                start_date="2021-06",
                end_date="2022-12",
            ),
        ],
        job_preferences=JobPreferences(
            roles=["Project Manager", "ESG Consultant", "Operations Analyst"],
            locations=["India", "Dubai"],
            remote_preference="remote",
            min_salary=75000,
        ),
    )


@pytest.fixture
def make_posting(fixed_now):
    """Factory for postings with neutral defaults."""

    def _make(posting_id="li-9", **overrides) -> JobPosting:
        values = dict(
            id=posting_id,
            title="Generic Role",
            company="Acme",
            location="Berlin, Germany",
            description="",
            requirements=[],
            url=f"https://example.com/{posting_id}",
            source=Source.LINKEDIN,
            posted_date=fixed_now,
            category="Operations",
        )
        values.update(overrides)
        return JobPosting(**values)

    return _make
