#!/usr/bin/env python3
"""
Tracker endpoints - jobs the user is pursuing and their status.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends

from pipeline.controller import CareerPilotController
from ..dependencies import get_controller
from ..models.requests import StatusUpdate, TrackRequest
from ..models.responses import TrackedJobResponse, TrackerResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tracker", tags=["tracker"])


@router.get("", response_model=TrackerResponse)
async def get_tracked_jobs(controller: CareerPilotController = Depends(get_controller)):
    """Get tracked jobs in the order they were first tracked."""
    jobs = controller.tracker.list()
    return TrackerResponse(count=len(jobs), jobs=jobs)


@router.post("/{job_id}", response_model=TrackedJobResponse)
async def track_job(
    job_id: str,
    request: Optional[TrackRequest] = None,
    controller: CareerPilotController = Depends(get_controller)
):
    """
    Track a job, or overwrite the snapshot of one already tracked.
    
    Scouted cannot be assigned.
    """
    request = request or TrackRequest()
    job = controller.track_job_by_id(job_id, request.status)
    return TrackedJobResponse(success=True, job=job)


@router.patch("/{job_id}", response_model=TrackedJobResponse)
async def update_status(
    job_id: str,
    request: StatusUpdate,
    controller: CareerPilotController = Depends(get_controller)
):
    """Change only the status of a tracked job. 404 if it is not tracked."""
    job = controller.set_tracking_status(job_id, request.status)
    return TrackedJobResponse(success=True, job=job)
