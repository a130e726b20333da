"""
Tests for contact discovery.
"""

import random

from jobassist.contacts import ContactFinder


def _finder(chooser=None, **kwargs):
    return ContactFinder(count_chooser=chooser, latency=0, **kwargs)


class TestFindContacts:
    """Test the synthetic contact lookup."""

    def test_zero_max_returns_empty_without_lookup(self, make_posting):
        calls = []
        finder = _finder(lambda m: calls.append(m) or 3)
        assert finder.find_contacts(make_posting(), 0) == []
        assert calls == []

    def test_negative_max_treated_as_zero(self, make_posting):
        assert _finder(lambda m: 2).find_contacts(make_posting(), -1) == []

    def test_contact_fields(self, make_posting):
        posting = make_posting(title="ESG Consultant", company="Global Consulting Firm")
        contacts = _finder(lambda m: 3).find_contacts(posting, 5)

        assert [c.name for c in contacts] == ["Contact Person 1", "Contact Person 2", "Contact Person 3"]
        assert contacts[0].position == "Hiring Manager"
        assert contacts[1].position == "ESG Consultant at Global Consulting Firm"
        assert all(c.company == "Global Consulting Firm" for c in contacts)
        assert contacts[2].profile_url == "https://linkedin.com/in/contact-3"

    def test_max_is_capped_at_five(self, make_posting):
        seen = []
        finder = _finder(lambda m: seen.append(m) or m)
        assert len(finder.find_contacts(make_posting(), 9)) == 5
        assert seen == [5]

    def test_chooser_result_clamped_to_max(self, make_posting):
        assert len(_finder(lambda m: 50).find_contacts(make_posting(), 2)) == 2
        assert _finder(lambda m: -4).find_contacts(make_posting(), 2) == []

    def test_lookup_failure_returns_empty(self, make_posting):
        def broken(maximum):
            raise ConnectionError("people search down")

        assert _finder(broken).find_contacts(make_posting(), 5) == []

    def test_seeded_rng_is_deterministic(self, make_posting):
        posting = make_posting()
        first = ContactFinder(rng=random.Random(42), latency=0).find_contacts(posting, 5)
        second = ContactFinder(rng=random.Random(42), latency=0).find_contacts(posting, 5)
        assert first == second
        assert 0 <= len(first) <= 5

    def test_latency_is_simulated(self, make_posting):
        slept = []
        finder = ContactFinder(count_chooser=lambda m: 1, latency=1.8, sleep=slept.append)
        finder.find_contacts(make_posting(), 3)
        assert slept == [1.8]
