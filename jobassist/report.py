"""Markdown summary of the job board: freshness, counts and top matches."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jobassist.config import REPORTS_DIR
from jobassist.log import get_logger
from jobassist.models import DashboardStats, JobPosting, ScraperStatus

log = get_logger(__name__)

TOP_N = 10


def _fmt_time(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M UTC") if value else "—"


def _clip(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def build_report(
    postings: list[JobPosting],
    stats: DashboardStats,
    status: ScraperStatus | None = None,
    *,
    top_n: int = TOP_N,
) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [f"# Job Search Report — {date}", ""]

    if status is not None:
        state = "running" if status.is_running else "stopped"
        lines.append(
            f"Scraper **{state}** | last run: {_fmt_time(status.last_run_time)}"
            f" | next run: {_fmt_time(status.next_run_time)}"
        )
        lines.append("")

    lines.append(
        f"**{stats.total_jobs}** jobs | **{stats.new_jobs}** new | "
        f"**{stats.applied_jobs}** applied | **{stats.interviews}** interviews | "
        f"**{stats.offers}** offers"
    )
    by_source = ", ".join(f"{k}: {v}" for k, v in stats.jobs_by_source.items())
    lines.append(f"By source — {by_source}")
    lines.append("")

    top = sorted(postings, key=lambda p: p.match_score, reverse=True)[:top_n]
    if top:
        lines.append("## Top Matches")
        lines.append("")
        lines.append("| # | Role | Company | Location | Score | Status | Link |")
        lines.append("|--:|------|---------|----------|------:|--------|------|")
        for i, p in enumerate(top, 1):
            link = f"[{p.source.value}]({p.url})" if p.url else "—"
            lines.append(
                f"| {i} | {_clip(p.title, 40)} | {_clip(p.company, 22)} | "
                f"{_clip(p.location, 18)} | {p.match_score} | {p.status.value} | {link} |"
            )
        lines.append("")
    else:
        lines.append("_No jobs on the board yet._")
        lines.append("")

    if stats.jobs_by_category:
        lines.append("## Categories")
        lines.append("")
        for category, count in sorted(stats.jobs_by_category.items(), key=lambda kv: -kv[1]):
            lines.append(f"- {category}: {count}")
        lines.append("")

    log.info("Built report: %d jobs, %d shown", stats.total_jobs, len(top))
    return "\n".join(lines)


def write_report(content: str, directory: Path | None = None) -> Path:
    directory = directory or REPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = directory / f"jobs_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
