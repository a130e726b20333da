"""
Tests for the spreadsheet mirror.
"""

import pytest

from jobassist.models import JobStatus
from jobassist.sheet_sync import SheetSync


@pytest.fixture
def sheet():
    return SheetSync("sheet-1", latencies={"profile": 0.0, "matches": 0.0, "application": 0.0})


class TestSheetSync:
    """Test the in-memory rows the sheet integration keeps."""

    def test_sync_profile(self, sheet, profile):
        sheet.sync_profile(profile)
        assert sheet.profile_row["name"] == "Test Candidate"

    def test_job_matches_upserted_by_id(self, sheet, make_posting):
        sheet.sync_job_matches([make_posting("li-1", match_score=20), make_posting("li-2")])
        sheet.sync_job_matches([make_posting("li-1", match_score=55)])

        assert [r["job_id"] for r in sheet.match_rows] == ["li-1", "li-2"]
        assert sheet.match_rows[0]["score"] == "55"

    def test_application_row(self, sheet, make_posting, fixed_now):
        posting = make_posting("ng-1", status=JobStatus.APPLIED)
        sheet.sync_job_application(posting, fixed_now, "cv-1")

        row = sheet.application_rows[0]
        assert row["applied_at"] == "2024-04-18 10:00"
        assert row["status"] == "applied"
        assert row["resume_id"] == "cv-1"
        assert row["cover_letter_id"] == ""

    def test_latency_is_simulated(self, profile):
        slept = []
        SheetSync(sleep=slept.append).sync_profile(profile)
        assert slept == [1.5]
