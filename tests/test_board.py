"""
Tests for the job board: merging, applying, filtering and stats.
"""

from datetime import timedelta

import pytest

from jobassist.board import JobBoard
from jobassist.contacts import ContactFinder
from jobassist.documents import DocumentGenerator
from jobassist.errors import DocumentGenerationError
from jobassist.models import Contact, JobStatus, Source
from jobassist.sheet_sync import SheetSync


class BrokenGenerator:
    def __init__(self, fail_on="resume"):
        self.fail_on = fail_on
        self.calls = []

    def generate_resume(self, profile, posting):
        self.calls.append("resume")
        if self.fail_on == "resume":
            raise DocumentGenerationError("resume", posting.id)
        return "cv-1"

    def generate_cover_letter(self, profile, posting):
        self.calls.append("cover_letter")
        raise DocumentGenerationError("cover_letter", posting.id)


@pytest.fixture
def generator(fixed_now):
    return DocumentGenerator(
        clock=lambda: fixed_now,
        latencies={"resume": 0.0, "cover_letter": 0.0},
        sleep=lambda s: None,
    )


@pytest.fixture
def sheet():
    return SheetSync("sheet-1", latencies={"profile": 0.0, "matches": 0.0, "application": 0.0})


@pytest.fixture
def board(make_posting, fixed_now):
    return JobBoard([
        make_posting("li-1", title="Project Manager", company="Zeta", category="ESG/Climate",
                     match_score=58, posted_date=fixed_now - timedelta(days=2)),
        make_posting("li-2", title="Operations Analyst", company="alpha bank", category="Operations",
                     match_score=45, posted_date=fixed_now),
        make_posting("ng-1", title="Process Design Engineer", company="Beta", category="Engineering",
                     source=Source.NAUKRIGULF, match_score=23, posted_date=fixed_now - timedelta(days=1),
                     description="Chemical engineering background"),
    ])


class TestMerge:
    """Test duplicate suppression when scrape results arrive."""

    def test_new_postings_added(self, board, make_posting):
        assert board.merge([make_posting("ng-2")]) == 1
        assert len(board) == 4
        assert "ng-2" in board

    def test_duplicates_suppressed(self, board, make_posting):
        existing = board.get("li-1")
        added = board.merge([make_posting("li-1", title="Changed"), make_posting("ng-2"), make_posting("ng-2")])
        assert added == 1
        assert board.get("li-1") is existing
        assert board.get("li-1").title == "Project Manager"

    def test_merge_empty(self, board):
        assert board.merge([]) == 0


class TestApply:
    """Test the apply action."""

    def test_apply_marks_applied(self, board, profile, generator, sheet, fixed_now):
        result = board.apply("li-1", profile, generator, sheet_sync=sheet, clock=lambda: fixed_now)

        assert board.get("li-1").status is JobStatus.APPLIED
        assert result.resume_id.startswith("cv-")
        assert result.cover_letter_id.startswith("cover-")
        assert result.applied_at == fixed_now
        assert sheet.application_rows[0]["job_id"] == "li-1"
        assert sheet.application_rows[0]["status"] == "applied"
        assert sheet.application_rows[0]["resume_id"] == result.resume_id

    def test_apply_without_cover_letter(self, board, profile, generator):
        result = board.apply("li-2", profile, generator, generate_cover=False)
        assert result.cover_letter_id is None
        assert board.get("li-2").status is JobStatus.APPLIED

    def test_resume_failure_keeps_status(self, board, profile):
        with pytest.raises(DocumentGenerationError):
            board.apply("li-1", profile, BrokenGenerator("resume"))
        assert board.get("li-1").status is JobStatus.NEW

    def test_cover_letter_failure_keeps_status(self, board, profile, sheet):
        generator = BrokenGenerator("cover_letter")
        with pytest.raises(DocumentGenerationError):
            board.apply("li-1", profile, generator, sheet_sync=sheet)
        assert generator.calls == ["resume", "cover_letter"]
        assert board.get("li-1").status is JobStatus.NEW
        assert sheet.application_rows == []

    def test_failure_leaves_other_postings_untouched(self, board, profile):
        before = {p.id: p.status for p in board.postings()}
        with pytest.raises(DocumentGenerationError):
            board.apply("li-1", profile, BrokenGenerator())
        assert {p.id: p.status for p in board.postings()} == before

    def test_sheet_failure_does_not_undo_apply(self, board, profile, generator):
        class BrokenSheet:
            def sync_job_application(self, *args):
                raise ConnectionError("sheets down")

        board.apply("li-1", profile, generator, sheet_sync=BrokenSheet())
        assert board.get("li-1").status is JobStatus.APPLIED

    def test_unknown_posting(self, board, profile, generator):
        with pytest.raises(KeyError):
            board.apply("nope", profile, generator)


class TestStatusAndContacts:
    """Test user-driven status changes and lazy contact lookup."""

    def test_update_status(self, board):
        board.update_status("li-1", "interview")
        assert board.get("li-1").status is JobStatus.INTERVIEW

    def test_update_status_rejects_unknown_value(self, board):
        with pytest.raises(ValueError):
            board.update_status("li-1", "ghosted")

    def test_mark_viewed_only_from_new(self, board):
        assert board.mark_viewed("li-1").status is JobStatus.VIEWED
        board.update_status("li-2", JobStatus.OFFER)
        assert board.mark_viewed("li-2").status is JobStatus.OFFER

    def test_contacts_looked_up_once(self, board):
        calls = []
        finder = ContactFinder(count_chooser=lambda m: calls.append(m) or 2, latency=0)
        board.ensure_contacts("li-1", finder, 5)
        board.ensure_contacts("li-1", finder, 5)
        assert len(board.get("li-1").contacts) == 2
        assert calls == [5]

    def test_existing_contacts_kept(self, board):
        board.get("ng-1").contacts = [Contact("Jane", "Recruiter", "Beta", "https://linkedin.com/in/jane")]
        finder = ContactFinder(count_chooser=lambda m: 5, latency=0)
        board.ensure_contacts("ng-1", finder, 5)
        assert [c.name for c in board.get("ng-1").contacts] == ["Jane"]

    def test_rescore_after_profile_edit(self, board, profile):
        board.rescore(profile)
        assert board.get("li-1").match_score == 20
        profile.add_skill("Chemical engineering")
        board.rescore(profile)
        assert board.get("ng-1").match_score == 3


class TestSearchAndStats:
    """Test filtering, sorting and dashboard counts."""

    def test_sort_by_relevance(self, board):
        assert [p.id for p in board.search()] == ["li-1", "li-2", "ng-1"]

    def test_sort_by_date(self, board):
        assert [p.id for p in board.search(sort_by="date")] == ["li-2", "ng-1", "li-1"]

    def test_sort_by_company(self, board):
        assert [p.id for p in board.search(sort_by="company")] == ["li-2", "ng-1", "li-1"]

    def test_invalid_sort(self, board):
        with pytest.raises(ValueError):
            board.search(sort_by="salary")

    def test_search_term_matches_title_company_description(self, board):
        assert [p.id for p in board.search("analyst")] == ["li-2"]
        assert [p.id for p in board.search("ZETA")] == ["li-1"]
        assert [p.id for p in board.search("chemical")] == ["ng-1"]

    def test_filter_by_category_and_source(self, board):
        assert [p.id for p in board.search(categories=["Operations", "Engineering"])] == ["li-2", "ng-1"]
        assert [p.id for p in board.search(sources=["Naukrigulf"])] == ["ng-1"]
        assert board.search(categories=["Operations"], sources=[Source.NAUKRIGULF]) == []

    def test_filter_by_status(self, board):
        board.update_status("li-2", "applied")
        assert [p.id for p in board.search(statuses=["applied"])] == ["li-2"]

    def test_categories(self, board):
        assert board.categories() == ["ESG/Climate", "Operations", "Engineering"]

    def test_stats(self, board):
        board.update_status("li-1", "applied")
        board.update_status("li-2", "interview")
        stats = board.stats()

        assert stats.total_jobs == 3
        assert stats.new_jobs == 1
        assert stats.applied_jobs == 1
        assert stats.interviews == 1
        assert stats.offers == 0
        assert stats.jobs_by_source == {"LinkedIn": 2, "Naukrigulf": 1}
        assert stats.jobs_by_category == {"ESG/Climate": 1, "Operations": 1, "Engineering": 1}

    def test_empty_board_stats(self):
        stats = JobBoard().stats()
        assert stats.total_jobs == 0
        assert stats.jobs_by_source == {"LinkedIn": 0, "Naukrigulf": 0}
