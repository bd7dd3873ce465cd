#!/usr/bin/env python3
"""
Search endpoints - run discovery and browse the leads it found.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.models import FilterCriteria
from pipeline.controller import CareerPilotController
from pipeline.state import Outcome
from ..dependencies import get_controller
from ..models.requests import SearchRequest
from ..models.responses import JobsResponse, SearchResponse
from ..utils import outcome_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.post("/search", response_model=SearchResponse)
async def start_search(
    request: Optional[SearchRequest] = None,
    controller: CareerPilotController = Depends(get_controller)
):
    """
    Run job discovery for the current profile.
    
    Needs a title and at least one skill. Moves to the Search step. A failed
    run keeps the previous leads and adds an ERR: line to the activity log.
    """
    location = request.location if request else None
    outcome = await controller.start_job_search(location)
    jobs = controller.visible_jobs()
    return SearchResponse(
        success=outcome == Outcome.COMPLETED,
        outcome=outcome,
        message=outcome_message(outcome, f"Found {len(controller.jobs)} leads."),
        count=len(jobs),
        jobs=jobs
    )


@router.get("/jobs", response_model=JobsResponse)
async def get_jobs(
    query: Optional[str] = Query(default=None, description="Substring of title or company"),
    min_score: Optional[float] = Query(default=None, ge=0, le=100, description="Minimum match score"),
    location: Optional[str] = Query(default=None, description="Substring of location"),
    controller: CareerPilotController = Depends(get_controller)
):
    """
    Get the leads passing the filter criteria.
    
    Query parameters override the stored criteria field by field.
    """
    stored = controller.filters
    criteria = FilterCriteria(
        query=query if query is not None else stored.query,
        min_score=min_score if min_score is not None else stored.min_score,
        location=location if location is not None else stored.location
    )
    jobs = controller.visible_jobs(criteria)
    return JobsResponse(
        count=len(jobs),
        total=len(controller.jobs),
        criteria=criteria,
        jobs=jobs
    )


@router.put("/jobs/filters", response_model=FilterCriteria)
async def set_filters(
    criteria: FilterCriteria,
    controller: CareerPilotController = Depends(get_controller)
):
    """Replace the stored filter criteria."""
    controller.set_filters(criteria)
    return controller.filters
