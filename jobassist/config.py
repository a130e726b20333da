"""Load profile and env configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from jobassist.log import get_logger
from jobassist.models import Profile

log = get_logger(__name__)

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
REPORTS_DIR: Path = Path(__file__).resolve().parent.parent / "reports"

MAX_CONTACTS_LIMIT = 5
DEFAULT_SCRAPE_INTERVAL_HOURS = 6.0


@dataclass(frozen=True)
class Settings:
    scrape_interval_hours: float = DEFAULT_SCRAPE_INTERVAL_HOURS
    max_contacts: int = MAX_CONTACTS_LIMIT
    simulate_latency: bool = True
    parallel_fetch: bool = True
    google_sheet_id: str = ""
    docs_template_id: str = ""

    @property
    def scrape_interval_seconds(self) -> float:
        return self.scrape_interval_hours * 3600


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _env_bool(key: str, default: bool) -> bool:
    raw = get_env(key)
    if not raw:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def clamp_max_contacts(value: int) -> int:
    return max(0, min(MAX_CONTACTS_LIMIT, value))


def load_settings() -> Settings:
    try:
        interval = float(get_env("SCRAPE_INTERVAL_HOURS") or DEFAULT_SCRAPE_INTERVAL_HOURS)
    except ValueError:
        log.warning("Invalid SCRAPE_INTERVAL_HOURS, using %.0f", DEFAULT_SCRAPE_INTERVAL_HOURS)
        interval = DEFAULT_SCRAPE_INTERVAL_HOURS
    if interval <= 0:
        log.warning("SCRAPE_INTERVAL_HOURS must be positive, using %.0f", DEFAULT_SCRAPE_INTERVAL_HOURS)
        interval = DEFAULT_SCRAPE_INTERVAL_HOURS

    try:
        max_contacts = int(get_env("MAX_CONTACTS") or MAX_CONTACTS_LIMIT)
    except ValueError:
        log.warning("Invalid MAX_CONTACTS, using %d", MAX_CONTACTS_LIMIT)
        max_contacts = MAX_CONTACTS_LIMIT

    return Settings(
        scrape_interval_hours=interval,
        max_contacts=clamp_max_contacts(max_contacts),
        simulate_latency=_env_bool("SIMULATE_LATENCY", True),
        parallel_fetch=_env_bool("PARALLEL_FETCH", True),
        google_sheet_id=get_env("GOOGLE_SHEET_ID"),
        docs_template_id=get_env("DOCS_TEMPLATE_ID"),
    )


def load_profile(path: Path | None = None) -> Profile:
    path = path or PROFILE_PATH
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    profile = Profile.from_dict(data)
    log.debug("Loaded profile for %s (%d skills)", profile.name, len(profile.skills))
    return profile


def write_profile(profile: Profile, path: Path | None = None) -> Path:
    """Write profile to YAML, e.g. after an edit from the dashboard."""
    path = path or PROFILE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    yaml_str = yaml.dump(profile.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(yaml_str, encoding="utf-8")
    log.info("Profile written → %s", path)
    return path
