"""Abstract base class for housing data providers."""

from abc import ABC, abstractmethod
from typing import Optional

from config.settings import Settings
from models.hub import HubMetrics
from models.jobsite import Jobsite, JobsiteMetrics
from models.listing import Listing
from models.plan import ListingFilters


class ProviderError(Exception):
    """A provider could not fetch data from its backing store."""


class HousingDataProvider(ABC):
    """Source of job sites, per-hub metrics, and listings for the planner."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Human-readable name of this provider."""
        ...

    @abstractmethod
    def get_jobsites(self) -> list[Jobsite]:
        """All active job sites, by name."""
        ...

    @abstractmethod
    def get_jobsite_by_slug(self, slug: str) -> Optional[Jobsite]:
        ...

    @abstractmethod
    def get_hub_metrics(self, jobsite_id: str) -> list[HubMetrics]:
        """Pre-aggregated metrics for every hub of a job site."""
        ...

    @abstractmethod
    def get_jobsite_metrics(self, jobsite_id: str) -> Optional[JobsiteMetrics]:
        ...

    @abstractmethod
    def get_listings_for_jobsite(
        self, jobsite_id: str, filters: Optional[ListingFilters] = None
    ) -> list[Listing]:
        """Active listings for a job site, newest first."""
        ...
