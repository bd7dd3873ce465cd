#!/usr/bin/env python3
"""
Profile endpoints - view and edit the user profile.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from pipeline.controller import CareerPilotController
from ..dependencies import get_controller
from ..models.requests import ProfileUpdate, SkillRequest
from ..models.responses import ProfileResponse, SkillRemovedResponse, SkillResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])


def _profile_response(controller: CareerPilotController) -> ProfileResponse:
    return ProfileResponse(
        profile=controller.profile,
        ready_for_search=controller.profile.is_ready_for_search()
    )


@router.get("", response_model=ProfileResponse)
async def get_profile(controller: CareerPilotController = Depends(get_controller)):
    """Get the profile and whether discovery may start."""
    return _profile_response(controller)


@router.put("", response_model=ProfileResponse)
async def update_profile(
    update: ProfileUpdate,
    controller: CareerPilotController = Depends(get_controller)
):
    """Update name, title and experience. Omitted fields are unchanged."""
    if update.name is not None:
        controller.set_name(update.name)
    if update.title is not None:
        controller.set_title(update.title)
    if update.experience is not None:
        controller.set_experience(update.experience)
    return _profile_response(controller)


@router.post("/skills", response_model=SkillResponse)
async def add_skill(
    request: SkillRequest,
    controller: CareerPilotController = Depends(get_controller)
):
    """Add a skill. Blank names are rejected."""
    skill = controller.add_skill(request.name, request.level)
    if skill is None:
        raise HTTPException(status_code=400, detail="Skill name must not be blank")
    return SkillResponse(success=True, skill=skill)


@router.delete("/skills/{name}", response_model=SkillRemovedResponse)
async def remove_skill(
    name: str,
    controller: CareerPilotController = Depends(get_controller)
):
    """Remove every skill entry with this name."""
    removed = controller.remove_skill(name)
    if removed == 0:
        raise HTTPException(status_code=404, detail=f"Skill not found: {name}")
    return SkillRemovedResponse(success=True, removed=removed)
