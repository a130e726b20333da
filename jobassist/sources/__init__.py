from .base import JobSearchBase
from .linkedin import LinkedInSource
from .naukrigulf import NaukrigulfSource

from jobassist.config import Settings
from jobassist.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobSearchBase", "LinkedInSource", "NaukrigulfSource",
    "get_sources",
]


def get_sources(settings: Settings | None = None) -> list[JobSearchBase]:
    """LinkedIn first, then Naukrigulf; acquisition keeps this order."""
    settings = settings or Settings()
    latency = None if settings.simulate_latency else 0.0
    sources: list[JobSearchBase] = [
        LinkedInSource(latency=latency),
        NaukrigulfSource(latency=latency),
    ]
    log.debug("Registered sources: %s", ", ".join(s.name for s in sources))
    return sources
