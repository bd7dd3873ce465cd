#!/usr/bin/env python3
"""
Analysis endpoints - deep analysis of one job and resume refinement.
"""

import logging
from fastapi import APIRouter, Depends, Query

from pipeline.controller import CareerPilotController
from pipeline.state import Outcome
from ..dependencies import get_controller
from ..models.requests import RefineRequest
from ..models.responses import AnalysisResponse
from ..utils import outcome_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


def _analysis_response(controller: CareerPilotController, outcome: Outcome, completed: str) -> AnalysisResponse:
    return AnalysisResponse(
        success=outcome == Outcome.COMPLETED,
        outcome=outcome,
        message=outcome_message(outcome, completed),
        job=controller.selected_job,
        analysis=controller.analysis
    )


@router.get("", response_model=AnalysisResponse)
async def get_analysis(controller: CareerPilotController = Depends(get_controller)):
    """Get the selected job and its analysis, if one is resident."""
    return AnalysisResponse(
        success=controller.analysis is not None,
        outcome=Outcome.COMPLETED if controller.analysis is not None else Outcome.SKIPPED,
        message="Analysis ready." if controller.analysis is not None else "No analysis available.",
        job=controller.selected_job,
        analysis=controller.analysis
    )


@router.post("/refine", response_model=AnalysisResponse)
async def refine_resume(
    request: RefineRequest,
    controller: CareerPilotController = Depends(get_controller)
):
    """Regenerate the resume tips of the current analysis from an instruction."""
    outcome = await controller.refine_resume(request.instruction)
    return _analysis_response(controller, outcome, "Resume optimization updated.")


@router.post("/{job_id}", response_model=AnalysisResponse)
async def analyze_job(
    job_id: str,
    tracked: bool = Query(default=False, description="Look in the tracked jobs first"),
    controller: CareerPilotController = Depends(get_controller)
):
    """
    Select a job and run its deep analysis.
    
    The job is looked up among the current leads, then the tracked jobs
    (the other way round with tracked=true).
    Selecting a job clears the chat and any previous analysis.
    """
    outcome = await controller.analyze_job_by_id(job_id, tracked=tracked)
    return _analysis_response(controller, outcome, "Analysis complete.")
