"""Find people at the hiring company for networking outreach (placeholder lookup)."""
from __future__ import annotations

import random
import time
from typing import Callable

from jobassist.config import MAX_CONTACTS_LIMIT, clamp_max_contacts
from jobassist.errors import ContactLookupError
from jobassist.log import get_logger
from jobassist.models import Contact, JobPosting

log = get_logger(__name__)

CountChooser = Callable[[int], int]


class ContactFinder:
    """Synthetic contact lookup.

    The number of contacts comes from *count_chooser* (given the clamped
    maximum, returns how many to produce). By default it is a random draw
    from ``rng``; tests pass a fixed chooser or a seeded ``random.Random``.
    """

    default_latency = 1.8

    def __init__(
        self,
        count_chooser: CountChooser | None = None,
        rng: random.Random | None = None,
        latency: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._rng = rng or random.Random()
        self._choose = count_chooser or (lambda maximum: self._rng.randint(0, maximum))
        self.latency = self.default_latency if latency is None else latency
        self._sleep = sleep

    def find_contacts(self, posting: JobPosting, max_contacts: int = MAX_CONTACTS_LIMIT) -> list[Contact]:
        """Between 0 and *max_contacts* (capped at 5) contacts; never raises."""
        max_contacts = clamp_max_contacts(max_contacts)
        if max_contacts == 0:
            return []
        log.info("Finding up to %d contacts for job at %s", max_contacts, posting.company)
        try:
            contacts = self._lookup(posting, max_contacts)
        except Exception as exc:
            err = ContactLookupError(f"contact lookup failed for {posting.id}: {exc}")
            log.warning("%s", err)
            return []
        log.info("Found %d contacts for job at %s", len(contacts), posting.company)
        return contacts

    def _lookup(self, posting: JobPosting, max_contacts: int) -> list[Contact]:
        if self.latency > 0:
            self._sleep(self.latency)
        count = max(0, min(max_contacts, int(self._choose(max_contacts))))
        return [
            Contact(
                name=f"Contact Person {i + 1}",
                position="Hiring Manager" if i == 0 else f"{posting.title} at {posting.company}",
                company=posting.company,
                profile_url=f"https://linkedin.com/in/contact-{i + 1}",
            )
            for i in range(count)
        ]
