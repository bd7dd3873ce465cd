"""
Career Agent - typed gateway to the external generation service.

Defines the four remote operations (discover, analyze, refine, chat) and
their request/response schemas. Every failure is surfaced as AgentError;
callers log it and decide what to show.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from core.exceptions import AgentError
from core.llm.interfaces import LLMProvider
from core.llm.schema_models import (
    JOB_ANALYSIS_SCHEMA,
    JOB_DISCOVERY_SCHEMA,
    RESUME_REFINEMENT_SCHEMA,
    JobDiscovery,
    RefinedResume,
)
from core.llm.system_prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    ANALYSIS_USER_MESSAGE,
    CHAT_FALLBACK_REPLY,
    CHAT_SYSTEM_PROMPT,
    DISCOVERY_SYSTEM_PROMPT,
    DISCOVERY_USER_MESSAGE,
    REFINEMENT_SYSTEM_PROMPT,
    REFINEMENT_USER_MESSAGE,
)
from core.models import ChatMessage, ChatRole, JobAnalysis, JobListing, UserProfile
from core.utils import clamp_match_score

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Remote"
DEFAULT_DISCOVERY_COUNT = 5

# Chat roles as the OpenAI-style API names them
_WIRE_ROLES = {ChatRole.USER: "user", ChatRole.MODEL: "assistant"}


@dataclass
class DiscoveryResult:
    """Jobs returned by one discovery call, in service order.

    sources holds search grounding references when the service returns them.
    OpenAI-compatible chat completions carry none, so it is empty there.
    """
    jobs: List[JobListing] = field(default_factory=list)
    sources: List[Dict[str, Any]] = field(default_factory=list)


class CareerAgent:
    """Agent client. Holds no state besides its provider."""

    def __init__(self, provider: LLMProvider, discovery_count: int = DEFAULT_DISCOVERY_COUNT):
        self.provider = provider
        self.discovery_count = discovery_count

    async def discover_jobs(self, profile: UserProfile, location: str = DEFAULT_LOCATION) -> DiscoveryResult:
        """Ask the service for job leads matching the profile.

        The caller guarantees a non-empty title and at least one skill.
        """
        skills = ", ".join(profile.skill_names)
        user_message = DISCOVERY_USER_MESSAGE.format(
            count=self.discovery_count,
            title=profile.title,
            skills=skills,
            location=location,
        )
        try:
            data = await self.provider.extract_structured_data(
                JOB_DISCOVERY_SCHEMA, DISCOVERY_SYSTEM_PROMPT, user_message
            )
            discovery = JobDiscovery.model_validate(data)
        except Exception as e:
            raise AgentError(f"Job discovery failed: {e}") from e

        jobs = [
            JobListing(
                id=item.id,
                title=item.title,
                company=item.company,
                location=item.location,
                snippet=item.snippet,
                url=item.url,
                match_score=clamp_match_score(item.match_score),
            )
            for item in discovery.jobs
        ]
        logger.info(f"Discovered {len(jobs)} jobs for '{profile.title}' in {location}")
        return DiscoveryResult(jobs=jobs)

    async def analyze_job(self, profile: UserProfile, job: JobListing) -> JobAnalysis:
        """Request a deep analysis of one job. Only the shape is deterministic."""
        user_message = ANALYSIS_USER_MESSAGE.format(
            profile=profile.model_dump_json(),
            job=job.model_dump_json(exclude={"tracking_status"}),
            company=job.company,
            title=job.title,
            location=job.location,
        )
        try:
            data = await self.provider.extract_structured_data(
                JOB_ANALYSIS_SCHEMA, ANALYSIS_SYSTEM_PROMPT, user_message
            )
            analysis = JobAnalysis.model_validate(data)
        except Exception as e:
            raise AgentError(f"Job analysis failed for {job.company}: {e}") from e

        analysis.match_score = clamp_match_score(analysis.match_score)
        return analysis

    async def refine_resume(self, original_tips: Sequence[str], job: JobListing, instruction: str) -> List[str]:
        """Regenerate resume tips. Never mutates original_tips; returns a new list."""
        user_message = REFINEMENT_USER_MESSAGE.format(
            tips=json.dumps(list(original_tips)),
            title=job.title,
            company=job.company,
            instruction=instruction,
        )
        try:
            data = await self.provider.extract_structured_data(
                RESUME_REFINEMENT_SCHEMA, REFINEMENT_SYSTEM_PROMPT, user_message
            )
            refined = RefinedResume.model_validate(data)
        except Exception as e:
            raise AgentError(f"Resume refinement failed: {e}") from e

        return list(refined.refined_tips)

    async def send_message(
        self,
        history: Sequence[ChatMessage],
        message: str,
        job: JobListing,
        analysis: JobAnalysis,
    ) -> str:
        """Send one chat turn. The service is stateless, so history goes on every call."""
        system_prompt = CHAT_SYSTEM_PROMPT.format(
            title=job.title,
            company=job.company,
            analysis=analysis.model_dump_json(),
        )
        messages = [{"role": _WIRE_ROLES[m.role], "content": m.text} for m in history]
        messages.append({"role": "user", "content": message})

        try:
            reply = await self.provider.generate_reply(system_prompt, messages)
        except Exception as e:
            raise AgentError(f"Chat request failed: {e}") from e

        return reply or CHAT_FALLBACK_REPLY

