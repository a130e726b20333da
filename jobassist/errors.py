"""Exception types raised by the acquisition, contact and document services."""
from __future__ import annotations


class JobAssistError(Exception):
    """Base class for jobassist errors."""


class SourceFetchError(JobAssistError):
    """A single job source failed; the other source's results still count."""

    def __init__(self, source: str, cause: BaseException | None = None) -> None:
        self.source = source
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{source} fetch failed{detail}")


class ContactLookupError(JobAssistError):
    """Contact discovery failed for a posting."""


class DocumentGenerationError(JobAssistError):
    """Resume or cover-letter generation failed; the apply attempt is aborted."""

    def __init__(self, kind: str, posting_id: str, cause: BaseException | None = None) -> None:
        self.kind = kind
        self.posting_id = posting_id
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{kind} generation failed for {posting_id}{detail}")
