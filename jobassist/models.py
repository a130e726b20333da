"""Data models for the profile, job postings and dashboard state."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any


class Source(str, Enum):
    LINKEDIN = "LinkedIn"
    NAUKRIGULF = "Naukrigulf"


class JobStatus(str, Enum):
    NEW = "new"
    VIEWED = "viewed"
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


class RemotePreference(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    ANY = "any"


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


_MONTH_RE = re.compile(r"(\d{4})-(\d{2})(?:-\d{2})?")


def _month(value: Any, label: str) -> str:
    """Normalize a YYYY-MM value; YAML turns unquoted dates into date objects."""
    if isinstance(value, date):
        return value.strftime("%Y-%m")
    match = _MONTH_RE.fullmatch(str(value).strip())
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise ValueError(f"{label} must be YYYY-MM, got {value!r}")
    return f"{match.group(1)}-{match.group(2)}"


@dataclass
class Experience:
    title: str
    company: str
    location: str = ""
    start_date: str = ""  # YYYY-MM
    end_date: str | None = None  # None = ongoing
    description: str = ""
    skills: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.start_date:
            self.start_date = _month(self.start_date, "start_date")
        if self.end_date:
            self.end_date = _month(self.end_date, "end_date")
        # Zero-padded YYYY-MM strings compare correctly as text.
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError(
                f"Experience {self.title!r}: start {self.start_date} is after end {self.end_date}"
            )

    @property
    def is_current(self) -> bool:
        return self.end_date is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "description": self.description,
            "skills": list(self.skills),
        }


@dataclass
class Education:
    degree: str
    institution: str
    location: str = ""
    graduation_date: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "degree": self.degree,
            "institution": self.institution,
            "location": self.location,
            "graduation_date": self.graduation_date,
            "description": self.description,
        }


@dataclass
class JobPreferences:
    roles: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    remote_preference: RemotePreference = RemotePreference.ANY
    min_salary: int = 0

    def __post_init__(self) -> None:
        self.remote_preference = RemotePreference(self.remote_preference)
        if self.min_salary < 0:
            raise ValueError(f"min_salary must be non-negative, got {self.min_salary}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "roles": list(self.roles),
            "locations": list(self.locations),
            "remote_preference": self.remote_preference.value,
            "min_salary": self.min_salary,
        }


@dataclass
class Profile:
    name: str
    email: str = ""
    skills: list[str] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    job_preferences: JobPreferences = field(default_factory=JobPreferences)
    resume_url: str = ""
    linkedin_profile: str = ""

    def __post_init__(self) -> None:
        self.skills = _dedupe(self.skills)

    def add_skill(self, skill: str) -> bool:
        """Append *skill* unless an identical entry exists. Returns True if added."""
        skill = skill.strip()
        if not skill or skill in self.skills:
            return False
        self.skills.append(skill)
        return True

    def remove_skill(self, skill: str) -> bool:
        if skill not in self.skills:
            return False
        self.skills.remove(skill)
        return True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Profile:
        prefs = data.get("job_preferences") or {}
        return cls(
            name=data.get("name", ""),
            email=data.get("email", ""),
            skills=[str(s) for s in data.get("skills") or []],
            experience=[Experience(**e) for e in data.get("experience") or []],
            education=[Education(**e) for e in data.get("education") or []],
            job_preferences=JobPreferences(
                roles=list(prefs.get("roles") or []),
                locations=list(prefs.get("locations") or []),
                remote_preference=prefs.get("remote_preference", "any"),
                min_salary=int(prefs.get("min_salary") or 0),
            ),
            resume_url=data.get("resume_url", ""),
            linkedin_profile=data.get("linkedin_profile", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "skills": list(self.skills),
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "job_preferences": self.job_preferences.to_dict(),
            "resume_url": self.resume_url,
            "linkedin_profile": self.linkedin_profile,
        }


@dataclass
class Contact:
    name: str
    position: str
    company: str
    profile_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "position": self.position,
            "company": self.company,
            "profile_url": self.profile_url,
        }


@dataclass
class JobPosting:
    id: str
    title: str
    company: str
    location: str
    description: str
    requirements: list[str]
    url: str
    source: Source
    posted_date: datetime
    match_score: int = 0
    category: str = ""
    contacts: list[Contact] = field(default_factory=list)
    status: JobStatus = JobStatus.NEW
    scraped: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "requirements": list(self.requirements),
            "url": self.url,
            "source": self.source.value,
            "posted_date": self.posted_date.isoformat(),
            "match_score": self.match_score,
            "category": self.category,
            "contacts": [c.to_dict() for c in self.contacts],
            "status": self.status.value,
            "scraped": self.scraped,
        }


@dataclass(frozen=True)
class ScraperStatus:
    is_running: bool
    last_run_time: datetime | None
    next_run_time: datetime | None


@dataclass
class DashboardStats:
    total_jobs: int = 0
    new_jobs: int = 0
    applied_jobs: int = 0
    interviews: int = 0
    offers: int = 0
    jobs_by_source: dict[str, int] = field(
        default_factory=lambda: {s.value: 0 for s in Source}
    )
    jobs_by_category: dict[str, int] = field(default_factory=dict)


@dataclass
class ApplicationResult:
    posting_id: str
    resume_id: str
    cover_letter_id: str | None
    applied_at: datetime
