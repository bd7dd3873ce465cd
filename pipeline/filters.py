"""
Job collection and client-side filter engine.

The visible job list is never cached: it is recomputed from the current
batch and criteria on every read.
"""
import logging
from typing import Iterable, Iterator, List, Optional

from core.models import FilterCriteria, JobListing
from core.utils import contains_ci

logger = logging.getLogger(__name__)


def job_matches(job: JobListing, criteria: FilterCriteria) -> bool:
    """Return True if the job passes all three predicates.

    - query: case-insensitive substring of title or company (empty passes)
    - min_score: match score, counting a missing score as 0
    - location: case-insensitive substring of location (empty passes)
    """
    if criteria.query and not (
        contains_ci(job.title, criteria.query) or contains_ci(job.company, criteria.query)
    ):
        return False
    if (job.match_score or 0) < criteria.min_score:
        return False
    if criteria.location and not contains_ci(job.location, criteria.location):
        return False
    return True


def filter_jobs(jobs: Iterable[JobListing], criteria: Optional[FilterCriteria] = None) -> List[JobListing]:
    """Filter jobs, keeping discovery order. No criteria means no filtering."""
    criteria = criteria or FilterCriteria()
    return [job for job in jobs if job_matches(job, criteria)]


class JobCollection:
    """The current discovery batch. A new batch replaces the old one wholesale."""

    def __init__(self, jobs: Optional[Iterable[JobListing]] = None):
        self._jobs: List[JobListing] = list(jobs or [])

    def replace(self, jobs: Iterable[JobListing]) -> None:
        self._jobs = list(jobs)
        logger.debug(f"Job collection replaced with {len(self._jobs)} jobs")

    def find(self, job_id: str) -> Optional[JobListing]:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    def all(self) -> List[JobListing]:
        return list(self._jobs)

    def filtered(self, criteria: FilterCriteria) -> List[JobListing]:
        return filter_jobs(self._jobs, criteria)

    def __iter__(self) -> Iterator[JobListing]:
        return iter(list(self._jobs))

    def __len__(self) -> int:
        return len(self._jobs)
