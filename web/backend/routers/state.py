#!/usr/bin/env python3
"""
State endpoints - current step, navigation and the activity log.
"""

import logging
from fastapi import APIRouter, Depends

from pipeline.controller import CareerPilotController
from ..dependencies import get_controller
from ..models.requests import NavigateRequest
from ..models.responses import LogsResponse, StateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["state"])


@router.get("/state", response_model=StateResponse)
async def get_state(controller: CareerPilotController = Depends(get_controller)):
    """Get the current step, loading flags and collection sizes."""
    return StateResponse.from_snapshot(controller.snapshot())


@router.post("/state/navigate", response_model=StateResponse)
async def navigate(
    request: NavigateRequest,
    controller: CareerPilotController = Depends(get_controller)
):
    """
    Move to another screen.
    
    Analysis is entered through POST /api/analysis/{job_id} and the first
    move to Search through POST /api/search; asking for those here is a 400.
    """
    controller.navigate(request.step)
    return StateResponse.from_snapshot(controller.snapshot())


@router.get("/logs", response_model=LogsResponse)
async def get_logs(controller: CareerPilotController = Depends(get_controller)):
    """Get the activity log, oldest line first."""
    lines = controller.logs()
    return LogsResponse(
        count=len(lines),
        lines=lines,
        errors=controller.activity.errors()
    )
