"""
Pydantic models for JSON schemas used in agent requests.

This module provides:
1. Type-safe Python models for the discovery and refinement replies
2. Runtime JSON schema generation for OpenAI-style structured output

The analysis reply reuses core.models.JobAnalysis directly.
All schemas follow the structured output requirements with strict validation.
"""
from typing import List

from pydantic import BaseModel, Field, ConfigDict

from core.models import JobAnalysis


# ============================================================================
# DISCOVERY SCHEMA MODELS
# ============================================================================

class DiscoveredJob(BaseModel):
    """A single job opening as returned by discovery."""
    model_config = ConfigDict(extra='forbid', allow_inf_nan=False)

    id: str = Field(description="Identifier unique within this batch")
    title: str = Field(description="Job title")
    company: str = Field(description="Hiring company")
    location: str = Field(description="Job location")
    snippet: str = Field(description="Short summary of the posting")
    url: str = Field(description="Original posting URL")
    match_score: float = Field(description="Predicted match from 0 to 100 based on the user's skills")


class JobDiscovery(BaseModel):
    """Discovery reply."""
    model_config = ConfigDict(extra='forbid')

    jobs: List[DiscoveredJob] = Field(description="Recent job openings")


JOB_DISCOVERY_SCHEMA = {
    "name": "job_discovery_schema",
    "strict": True,
    "schema": JobDiscovery.model_json_schema()
}


# ============================================================================
# ANALYSIS SCHEMA
# ============================================================================

JOB_ANALYSIS_SCHEMA = {
    "name": "job_analysis_schema",
    "strict": True,
    "schema": JobAnalysis.model_json_schema()
}


# ============================================================================
# RESUME REFINEMENT SCHEMA MODELS
# ============================================================================

class RefinedResume(BaseModel):
    """Refinement reply."""
    model_config = ConfigDict(extra='forbid')

    refined_tips: List[str] = Field(description="Regenerated resume bullet points")


RESUME_REFINEMENT_SCHEMA = {
    "name": "resume_refinement_schema",
    "strict": True,
    "schema": RefinedResume.model_json_schema()
}
