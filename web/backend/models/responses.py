#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from core.models import ChatMessage, FilterCriteria, JobAnalysis, JobListing, Skill, UserProfile
from pipeline.controller import ControllerSnapshot
from pipeline.state import Outcome, PipelineStep


class StateResponse(BaseModel):
    """Current pipeline state."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "step": "Search",
                "is_discovering": False,
                "is_analyzing": False,
                "is_refining": False,
                "is_chatting": False,
                "selected_job_id": None,
                "job_count": 5,
                "visible_job_count": 3,
                "tracked_count": 1,
                "has_analysis": False,
                "chat_length": 0
            }
        }
    )

    step: PipelineStep
    is_discovering: bool
    is_analyzing: bool
    is_refining: bool
    is_chatting: bool
    selected_job_id: Optional[str]
    job_count: int = Field(ge=0)
    visible_job_count: int = Field(ge=0)
    tracked_count: int = Field(ge=0)
    has_analysis: bool
    chat_length: int = Field(ge=0)

    @classmethod
    def from_snapshot(cls, snapshot: ControllerSnapshot) -> "StateResponse":
        return cls(**asdict(snapshot))


class LogsResponse(BaseModel):
    """Activity log, oldest line first."""
    count: int
    lines: List[str]
    errors: List[str]


class ProfileResponse(BaseModel):
    """The user profile and whether discovery may start."""
    profile: UserProfile
    ready_for_search: bool


class SkillResponse(BaseModel):
    """Result of adding a skill."""
    success: bool
    skill: Skill


class SkillRemovedResponse(BaseModel):
    """Result of removing a skill."""
    success: bool
    removed: int = Field(ge=0, description="Number of entries removed")


class OperationResponse(BaseModel):
    """Result of a remote operation."""
    success: bool
    outcome: Outcome
    message: str


class SearchResponse(OperationResponse):
    """Result of a discovery run with the resulting visible leads."""
    count: int
    jobs: List[JobListing]


class JobsResponse(BaseModel):
    """Visible leads for the given criteria."""
    count: int
    total: int
    criteria: FilterCriteria
    jobs: List[JobListing]


class AnalysisResponse(OperationResponse):
    """The selected job and its analysis, if one is resident."""
    job: Optional[JobListing] = None
    analysis: Optional[JobAnalysis] = None


class ChatResponse(OperationResponse):
    """Chat transcript for the selected job."""
    messages: List[ChatMessage]


class TrackerResponse(BaseModel):
    """Tracked jobs in insertion order."""
    count: int
    jobs: List[JobListing]


class TrackedJobResponse(BaseModel):
    """A single tracked job snapshot."""
    success: bool
    job: JobListing
