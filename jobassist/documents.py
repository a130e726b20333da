"""Generate tailored resume / cover-letter documents for an application.

Documents land in a per-posting folder of the document store:
``/Jobs/<category> – <company> – <posting id>/``. The store here is an
in-memory placeholder; a Google Drive backed store would implement the
same two methods.
"""
from __future__ import annotations

import threading
import time
from datetime import datetime, timezone
from typing import Any, Callable

from jobassist.errors import DocumentGenerationError
from jobassist.log import get_logger
from jobassist.models import JobPosting, Profile
from jobassist.retry import retry

log = get_logger(__name__)

RESUME = "resume"
COVER_LETTER = "cover_letter"

_ID_PREFIX = {RESUME: "cv", COVER_LETTER: "cover"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def folder_for(posting: JobPosting) -> str:
    return f"/Jobs/{posting.category} – {posting.company} – {posting.id}/"


class InMemoryDocumentStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.folders: list[str] = []
        self.documents: dict[str, dict[str, Any]] = {}

    def ensure_folder(self, path: str) -> bool:
        """Create *path* unless it exists. Returns True if it was created."""
        with self._lock:
            if path in self.folders:
                return False
            self.folders.append(path)
            return True

    def save(self, folder: str, doc_id: str, record: dict[str, Any]) -> None:
        with self._lock:
            self.documents[doc_id] = {**record, "folder": folder}


class DocumentGenerator:
    default_latencies = {RESUME: 2.0, COVER_LETTER: 1.5}

    def __init__(
        self,
        store: Any = None,
        *,
        template_id: str = "",
        clock: Callable[[], datetime] = _utcnow,
        latencies: dict[str, float] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        max_attempts: int = 3,
    ) -> None:
        self.store = store if store is not None else InMemoryDocumentStore()
        self.template_id = template_id
        self._clock = clock
        self.latencies = dict(self.default_latencies)
        if latencies is not None:
            self.latencies.update(latencies)
        self._sleep = sleep
        self._write = retry(
            max_attempts=max_attempts,
            base_delay=0.5,
            retryable=(OSError,),
            sleep=sleep,
        )(self._write_document)

    def generate_resume(self, profile: Profile, posting: JobPosting) -> str:
        return self._generate(RESUME, profile, posting)

    def generate_cover_letter(self, profile: Profile, posting: JobPosting) -> str:
        return self._generate(COVER_LETTER, profile, posting)

    def _generate(self, kind: str, profile: Profile, posting: JobPosting) -> str:
        log.info(
            "Generating %s for %s: %s at %s",
            kind.replace("_", " "), profile.name, posting.title, posting.company,
        )
        latency = self.latencies.get(kind, 0.0)
        if latency > 0:
            self._sleep(latency)

        stamp = int(self._clock().timestamp() * 1000)
        doc_id = f"{_ID_PREFIX[kind]}-{stamp}-{posting.id}"
        record = {
            "kind": kind,
            "template_id": self.template_id,
            "candidate": profile.name,
            "posting_id": posting.id,
            "title": posting.title,
            "company": posting.company,
            "skills": profile.skills[:8],
        }
        try:
            self._write(folder_for(posting), doc_id, record)
        except Exception as exc:
            raise DocumentGenerationError(kind, posting.id, exc) from exc
        log.info("Generated %s document %s", kind.replace("_", " "), doc_id)
        return doc_id

    def _write_document(self, folder: str, doc_id: str, record: dict[str, Any]) -> None:
        if self.store.ensure_folder(folder):
            log.debug("Created folder %s", folder)
        self.store.save(folder, doc_id, record)
