"""
Job search assistant wiring.

Builds the process-level context (scraper, board, contact finder, document
generator, sheet sync) and runs one acquisition pass on demand.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jobassist.board import JobBoard
from jobassist.config import PROFILE_PATH, Settings, load_profile, load_settings, write_profile
from jobassist.contacts import ContactFinder
from jobassist.documents import DocumentGenerator
from jobassist.log import get_logger
from jobassist.models import Profile
from jobassist.report import build_report
from jobassist.scraper import JobScraperService
from jobassist.seed import seed_postings
from jobassist.sheet_sync import SheetSync
from jobassist.sources import get_sources

log = get_logger(__name__)


@dataclass
class AssistantContext:
    settings: Settings
    profile: Profile
    board: JobBoard
    scraper: JobScraperService
    contacts: ContactFinder
    documents: DocumentGenerator
    sheet: SheetSync
    profile_path: Path = PROFILE_PATH

    def apply(self, posting_id: str, generate_cover: bool = True):
        return self.board.apply(
            posting_id,
            self.profile,
            self.documents,
            generate_cover=generate_cover,
            sheet_sync=self.sheet,
        )

    def open_details(self, posting_id: str):
        self.board.mark_viewed(posting_id)
        return self.board.ensure_contacts(posting_id, self.contacts, self.settings.max_contacts)

    def update_profile(self, profile: Profile) -> None:
        self.profile = profile
        self.scraper.update_profile(profile)
        self.board.rescore(profile)

    def save_profile(self, profile: Profile) -> Path:
        """Persist an edited profile, mirror it to the sheet, and re-score."""
        path = write_profile(profile, self.profile_path)
        try:
            self.sheet.sync_profile(profile)
        except Exception as exc:
            log.warning("Sheet sync of profile failed: %s", exc)
        self.update_profile(profile)
        return path


def build_context(
    settings: Settings | None = None,
    profile: Profile | None = None,
    *,
    seeded: bool = True,
    profile_path: Path | None = None,
) -> AssistantContext:
    settings = settings or load_settings()
    profile_path = profile_path or PROFILE_PATH
    profile = profile or load_profile(profile_path)
    fast = not settings.simulate_latency
    latency = 0.0 if fast else None

    board = JobBoard(seed_postings() if seeded else ())
    sheet = SheetSync(
        settings.google_sheet_id,
        latencies=dict.fromkeys(SheetSync.default_latencies, 0.0) if fast else None,
    )
    scraper = JobScraperService(
        get_sources(settings),
        settings=settings,
        on_results=board.merge,
        sheet_sync=sheet,
    )
    documents = DocumentGenerator(
        template_id=settings.docs_template_id,
        latencies=dict.fromkeys(DocumentGenerator.default_latencies, 0.0) if fast else None,
    )
    return AssistantContext(
        settings=settings,
        profile=profile,
        board=board,
        scraper=scraper,
        contacts=ContactFinder(latency=latency),
        documents=documents,
        sheet=sheet,
        profile_path=profile_path,
    )


def run_once(ctx: AssistantContext | None = None) -> dict[str, Any]:
    ctx = ctx or build_context()
    result = ctx.scraper.scrape_now(ctx.profile)
    postings, new_jobs = result.postings, result.new_jobs
    report = build_report(ctx.board.postings(), ctx.board.stats(), ctx.scraper.get_status())
    log.info("Run complete — found=%d, new=%d", len(postings), new_jobs)
    return {
        "jobs_found": len(postings),
        "new_jobs": new_jobs,
        "top_score": postings[0].match_score if postings else 0,
        "report": report,
    }
