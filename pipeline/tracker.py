"""
Tracking store - jobs the user is actively pursuing, keyed by job id.

Entries are deep copies of the listing at tracking time, so the store and
the discovery list never share objects and may diverge freely.

Usage:
    from pipeline.tracker import TrackingStore

    store = TrackingStore()
    store.track(job)                                  # Interested
    store.track(job, TrackingStatus.APPLIED)          # upsert, same entry
    store.set_status(job.id, TrackingStatus.INTERVIEWING)
"""
import logging
from typing import Dict, List, Optional

from core.exceptions import InvalidTrackingStatusError, TrackedJobNotFoundError
from core.models import ASSIGNABLE_STATUSES, JobListing, TrackingStatus

logger = logging.getLogger(__name__)


def _check_assignable(status: TrackingStatus) -> TrackingStatus:
    try:
        status = TrackingStatus(status)
    except ValueError:
        raise InvalidTrackingStatusError(f"Unknown tracking status: {status}") from None
    if status not in ASSIGNABLE_STATUSES:
        raise InvalidTrackingStatusError(
            f"Status {status.value} cannot be assigned; use one of "
            f"{', '.join(s.value for s in ASSIGNABLE_STATUSES)}"
        )
    return status


class TrackingStore:
    """Insertion-ordered upsert store of tracked job snapshots."""

    def __init__(self):
        # dicts keep insertion order, and overwriting a key keeps its slot
        self._jobs: Dict[str, JobListing] = {}

    def track(self, job: JobListing, status: TrackingStatus = TrackingStatus.INTERESTED) -> JobListing:
        """Insert or overwrite the snapshot for job.id with the given status."""
        status = _check_assignable(status)
        snapshot = job.model_copy(deep=True, update={"tracking_status": status})
        is_update = job.id in self._jobs
        self._jobs[job.id] = snapshot
        logger.debug("%s %s @ %s [%s]", "Updated" if is_update else "Tracked",
                     job.title, job.company, status.value)
        return snapshot

    def set_status(self, job_id: str, status: TrackingStatus) -> JobListing:
        """Change only the status of a tracked job.

        Raises:
            TrackedJobNotFoundError: If job_id is not tracked.
            InvalidTrackingStatusError: If status is not assignable.
        """
        status = _check_assignable(status)
        current = self._jobs.get(job_id)
        if current is None:
            raise TrackedJobNotFoundError(f"Job {job_id} is not tracked")
        updated = current.model_copy(update={"tracking_status": status})
        self._jobs[job_id] = updated
        logger.debug(f"Updated {job_id} → {status.value}")
        return updated

    def get(self, job_id: str) -> Optional[JobListing]:
        return self._jobs.get(job_id)

    def list(self) -> List[JobListing]:
        return list(self._jobs.values())

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._jobs

    def __len__(self) -> int:
        return len(self._jobs)
