"""
Tests for resume and cover-letter generation.
"""

import pytest

from jobassist.documents import DocumentGenerator, InMemoryDocumentStore, folder_for
from jobassist.errors import DocumentGenerationError


class FlakyStore(InMemoryDocumentStore):
    """Fails the first *failures* saves with OSError."""

    def __init__(self, failures, error=OSError):
        super().__init__()
        self.failures = failures
        self.error = error
        self.attempts = 0

    def save(self, folder, doc_id, record):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise self.error("drive unavailable")
        super().save(folder, doc_id, record)


def _generator(fixed_now, store=None, slept=None):
    return DocumentGenerator(
        store,
        clock=lambda: fixed_now,
        latencies={"resume": 0.0, "cover_letter": 0.0},
        sleep=(slept.append if slept is not None else lambda s: None),
    )


@pytest.fixture
def posting(make_posting):
    return make_posting(
        "li-1",
        title="Project Manager - ESG Initiatives",
        company="Global Sustainability Corp",
        category="ESG/Climate",
    )


class TestDocumentGenerator:
    """Test document ids, folder layout and failure handling."""

    def test_document_ids(self, fixed_now, profile, posting):
        stamp = int(fixed_now.timestamp() * 1000)
        generator = _generator(fixed_now)
        assert generator.generate_resume(profile, posting) == f"cv-{stamp}-li-1"
        assert generator.generate_cover_letter(profile, posting) == f"cover-{stamp}-li-1"

    def test_folder_layout(self, posting):
        assert folder_for(posting) == "/Jobs/ESG/Climate – Global Sustainability Corp – li-1/"

    def test_documents_share_one_folder(self, fixed_now, profile, posting):
        store = InMemoryDocumentStore()
        generator = _generator(fixed_now, store)
        resume_id = generator.generate_resume(profile, posting)
        cover_id = generator.generate_cover_letter(profile, posting)

        assert store.folders == [folder_for(posting)]
        assert store.documents[resume_id]["kind"] == "resume"
        assert store.documents[cover_id]["kind"] == "cover_letter"
        assert store.documents[cover_id]["folder"] == folder_for(posting)

    def test_regenerating_does_not_duplicate_folder(self, fixed_now, profile, posting):
        store = InMemoryDocumentStore()
        generator = _generator(fixed_now, store)
        generator.generate_resume(profile, posting)
        generator.generate_resume(profile, posting)
        assert len(store.folders) == 1

    def test_transient_store_error_is_retried(self, fixed_now, profile, posting):
        store = FlakyStore(failures=1)
        slept = []
        doc_id = _generator(fixed_now, store, slept).generate_resume(profile, posting)

        assert store.attempts == 2
        assert doc_id in store.documents
        assert len(slept) == 1
        assert store.folders == [folder_for(posting)]

    def test_persistent_store_error_raises(self, fixed_now, profile, posting):
        store = FlakyStore(failures=10)
        with pytest.raises(DocumentGenerationError) as exc_info:
            _generator(fixed_now, store).generate_cover_letter(profile, posting)
        assert store.attempts == 3
        assert exc_info.value.kind == "cover_letter"
        assert exc_info.value.posting_id == "li-1"

    def test_non_transient_error_not_retried(self, fixed_now, profile, posting):
        store = FlakyStore(failures=1, error=ValueError)
        with pytest.raises(DocumentGenerationError):
            _generator(fixed_now, store).generate_resume(profile, posting)
        assert store.attempts == 1

    def test_latency_is_simulated(self, fixed_now, profile, posting):
        slept = []
        generator = DocumentGenerator(clock=lambda: fixed_now, sleep=slept.append)
        generator.generate_resume(profile, posting)
        generator.generate_cover_letter(profile, posting)
        assert slept == [2.0, 1.5]
