"""Score job postings against the profile and rank them."""
from __future__ import annotations

from dataclasses import replace

from jobassist.log import get_logger
from jobassist.models import JobPosting, Profile, RemotePreference

log = get_logger(__name__)

ROLE_IN_TITLE_POINTS = 20
SKILL_IN_REQUIREMENTS_POINTS = 5
SKILL_IN_DESCRIPTION_POINTS = 3
LOCATION_POINTS = 15
REMOTE_POINTS = 15
MAX_SCORE = 100


def _normalize(s: str) -> str:
    return (s or "").lower()


def _needles(values: list[str]) -> list[str]:
    # An empty needle is a substring of everything.
    return [_normalize(v) for v in values if v and v.strip()]


def score_posting(posting: JobPosting, profile: Profile) -> int:
    """Additive 0–100 match score for one posting.

    +20 per preferred role found in the title, +5 per skill found in any
    requirement, +3 per skill found in the description, +15 when a
    preferred location appears in the posting location, and +15 more when
    the candidate wants remote work and the posting says remote.
    """
    prefs = profile.job_preferences
    title = _normalize(posting.title)
    description = _normalize(posting.description)
    location = _normalize(posting.location)
    requirements = [_normalize(r) for r in posting.requirements]

    score = 0

    for role in _needles(prefs.roles):
        if role in title:
            score += ROLE_IN_TITLE_POINTS

    for skill in _needles(profile.skills):
        if any(skill in req for req in requirements):
            score += SKILL_IN_REQUIREMENTS_POINTS
        if skill in description:
            score += SKILL_IN_DESCRIPTION_POINTS

    if any(loc in location for loc in _needles(prefs.locations)):
        score += LOCATION_POINTS

    if prefs.remote_preference is RemotePreference.REMOTE and "remote" in location:
        score += REMOTE_POINTS

    return min(MAX_SCORE, score)


def rank_postings(postings: list[JobPosting], profile: Profile) -> list[JobPosting]:
    """Score every posting and sort by score, highest first.

    Returns copies; the input postings are left untouched. The sort is
    stable, so equal scores keep their acquisition order.
    """
    scored = [
        replace(p, match_score=score_posting(p, profile), contacts=list(p.contacts))
        for p in postings
    ]
    ranked = sorted(scored, key=lambda p: p.match_score, reverse=True)
    if ranked:
        log.info(
            "Scored %d postings (top %d, bottom %d)",
            len(ranked), ranked[0].match_score, ranked[-1].match_score,
        )
    return ranked
