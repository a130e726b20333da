#!/usr/bin/env python3
"""Entry point: run one job scrape, or keep the scheduler running with --watch."""
from __future__ import annotations

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobassist.log import get_logger
from jobassist.config import PROFILE_PATH

log = get_logger(__name__)


def _check_setup() -> bool:
    """Return True if first-run setup is needed."""
    if not PROFILE_PATH.exists():
        print()
        print("  No profile found. Create one first:")
        print(f"    {PROFILE_PATH}")
        print()
        return True
    return False


def _watch(ctx) -> None:
    ctx.scraper.start(ctx.profile)
    try:
        while True:
            time.sleep(60)
            status = ctx.scraper.get_status()
            log.debug("Board: %d jobs, next run %s", len(ctx.board), status.next_run_time)
    except KeyboardInterrupt:
        log.info("Interrupted")
    finally:
        ctx.scraper.stop()


if __name__ == "__main__":
    if _check_setup():
        sys.exit(1)

    from jobassist.agent import build_context, run_once
    from jobassist.report import write_report

    ctx = build_context()
    if "--watch" in sys.argv:
        _watch(ctx)
        sys.exit(0)

    result = run_once(ctx)
    log.info("Run complete.")
    log.info("  Jobs found: %d", result["jobs_found"])
    log.info("  New on board: %d", result["new_jobs"])
    log.info("  Top score: %d", result["top_score"])
    if "--write-report" in sys.argv:
        log.info("  Report: %s", write_report(result["report"]))
    else:
        print(result["report"])
