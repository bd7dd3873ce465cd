#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional

from core.models import SkillLevel, TrackingStatus
from pipeline.state import PipelineStep


class NavigateRequest(BaseModel):
    """Request to move to another screen."""
    step: PipelineStep = Field(..., description="Target step: Profile, Search or Tracker")


class ProfileUpdate(BaseModel):
    """Partial profile update. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, description="Display name")
    title: Optional[str] = Field(None, description="Target job title")
    experience: Optional[str] = Field(None, description="Free-text experience summary")


class SkillRequest(BaseModel):
    """Request to add a skill to the profile."""
    name: str = Field(..., description="Skill name")
    level: SkillLevel = Field(default=SkillLevel.INTERMEDIATE, description="Beginner, Intermediate or Expert")


class SearchRequest(BaseModel):
    """Request to run job discovery."""
    location: Optional[str] = Field(None, description="Location to scout; configured default when omitted")


class RefineRequest(BaseModel):
    """Follow-up instruction for the resume tips."""
    instruction: str = Field(..., description="e.g. 'Make it more concise'")


class ChatRequest(BaseModel):
    """A chat message about the selected job."""
    text: str = Field(..., description="Message text")


class TrackRequest(BaseModel):
    """Request to track a job."""
    status: TrackingStatus = Field(
        default=TrackingStatus.INTERESTED,
        description="Interested, Applied, Interviewing or Rejected"
    )


class StatusUpdate(BaseModel):
    """Request to change the status of a tracked job."""
    status: TrackingStatus = Field(..., description="Interested, Applied, Interviewing or Rejected")
