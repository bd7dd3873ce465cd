"""
Career pilot controller - owns the application state and sequences the
agent calls around it.

Flow: Profile -> Search -> Analysis -> Tracker. Profile and Tracker can be
reached from any screen, Search from Analysis or Tracker. Analysis is only
entered through an analyze request.

Each remote operation has its own loading flag (a request while loading is
a no-op) and its own generation counter (a completion whose context has
moved on is dropped instead of applied).

Agent failures never escape an operation: the flag is cleared, one ERR: line
goes to the activity log, and the screen stays where it was heading.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from core.agent import CareerAgent, DEFAULT_LOCATION
from core.exceptions import AgentError, InvalidTransitionError, JobNotFoundError
from core.models import (
    ChatMessage,
    FilterCriteria,
    JobAnalysis,
    JobListing,
    Skill,
    SkillLevel,
    TrackingStatus,
    UserProfile,
)
from pipeline.activity_log import ActivityLog, DEFAULT_CAPACITY
from pipeline.chat import ChatSession
from pipeline.filters import JobCollection
from pipeline.state import Operation, Outcome, PipelineState, PipelineStep, can_navigate
from pipeline.tracker import TrackingStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControllerSnapshot:
    """Read-only view of the controller for display."""
    step: PipelineStep
    is_discovering: bool
    is_analyzing: bool
    is_refining: bool
    is_chatting: bool
    selected_job_id: Optional[str]
    job_count: int
    visible_job_count: int
    tracked_count: int
    has_analysis: bool
    chat_length: int


class CareerPilotController:
    """Single owner of the profile, leads, analysis, chat and tracker state."""

    def __init__(
        self,
        agent: CareerAgent,
        default_location: str = DEFAULT_LOCATION,
        log_capacity: int = DEFAULT_CAPACITY,
    ):
        self.agent = agent
        self.default_location = default_location
        self.profile = UserProfile()
        self.state = PipelineState()
        self.jobs = JobCollection()
        self.filters = FilterCriteria()
        self.tracker = TrackingStore()
        self.chat = ChatSession()
        self.activity = ActivityLog(capacity=log_capacity)
        self.selected_job: Optional[JobListing] = None
        self.analysis: Optional[JobAnalysis] = None

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def set_title(self, title: str) -> None:
        self.profile.title = title

    def set_name(self, name: str) -> None:
        self.profile.name = name

    def set_experience(self, experience: str) -> None:
        self.profile.experience = experience

    def add_skill(self, name: str, level: SkillLevel = SkillLevel.INTERMEDIATE) -> Optional[Skill]:
        return self.profile.add_skill(name, level)

    def remove_skill(self, name: str) -> int:
        return self.profile.remove_skill(name)

    # ------------------------------------------------------------------
    # Leads and filters
    # ------------------------------------------------------------------

    def set_filters(self, criteria: FilterCriteria) -> None:
        self.filters = criteria

    def visible_jobs(self, criteria: Optional[FilterCriteria] = None) -> List[JobListing]:
        """Discovered jobs passing the given criteria (stored criteria by default)."""
        return self.jobs.filtered(criteria or self.filters)

    def find_job(self, job_id: str, tracked: bool = False) -> JobListing:
        """Look a job up in the discovery batch, then the tracker, then the selection.

        With tracked=True the tracker is searched first, so a job opened from
        the tracker screen wins over a later lead that reuses its id.

        Raises:
            JobNotFoundError: If the id is unknown everywhere.
        """
        if tracked:
            job = self.tracker.get(job_id) or self.jobs.find(job_id)
        else:
            job = self.jobs.find(job_id) or self.tracker.get(job_id)
        if job is None and self.selected_job is not None and self.selected_job.id == job_id:
            job = self.selected_job
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")
        return job

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate(self, step: PipelineStep) -> PipelineStep:
        """Move between screens without starting a remote operation.

        Raises:
            InvalidTransitionError: For moves that need an operation
                (entering Analysis, or Profile -> Search).
        """
        step = PipelineStep(step)
        if not can_navigate(self.state.step, step):
            raise InvalidTransitionError(
                f"Cannot move from {self.state.step.value} to {step.value}"
            )
        self.state.step = step
        return step

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    async def start_job_search(self, location: Optional[str] = None) -> Outcome:
        """Run discovery and move to Search.

        Requires a title and at least one skill. A failed discovery still
        lands on Search, keeping whatever batch was there before.
        """
        if not self.profile.is_ready_for_search():
            logger.info("Job search needs a title and at least one skill")
            return Outcome.SKIPPED
        if self.state.is_discovering:
            return Outcome.SKIPPED

        location = location or self.default_location
        token = self.state.begin(Operation.DISCOVER)
        self.state.step = PipelineStep.SEARCH
        self.activity.info(f'Agent scouting for "{self.profile.title}" leads in {location}...')
        try:
            result = await self.agent.discover_jobs(self.profile, location)
        except AgentError as e:
            logger.warning(f"Discovery failed: {e}")
            self.activity.error("Scouting failed.")
            return Outcome.FAILED
        finally:
            self.state.finish(Operation.DISCOVER)

        if not self.state.is_current(Operation.DISCOVER, token):
            logger.debug("Dropping stale discovery result")
            return Outcome.STALE

        self.jobs.replace(result.jobs)
        self.activity.info(f"Discovery complete. Found {len(result.jobs)} leads.")
        return Outcome.COMPLETED

    async def analyze_job(self, job: JobListing) -> Outcome:
        """Select a job, move to Analysis and request its deep analysis.

        The chat and any previous analysis are discarded up front, so a
        failed analysis leaves the Analysis screen empty.
        """
        if self.state.is_analyzing:
            return Outcome.SKIPPED

        token = self.state.begin(Operation.ANALYZE)
        self.selected_job = job
        self.state.selected_job_id = job.id
        self.state.step = PipelineStep.ANALYSIS
        self.chat.clear()
        self.analysis = None
        # replies and refinements for the previous job must not land here
        self.state.invalidate(Operation.CHAT)
        self.state.invalidate(Operation.REFINE)

        self.activity.info(f"Initiating deep scan & market research for {job.company}...")
        try:
            result = await self.agent.analyze_job(self.profile, job)
        except AgentError as e:
            logger.warning(f"Analysis of job {job.id} failed: {e}")
            self.activity.error("Deep scan failed.")
            return Outcome.FAILED
        finally:
            self.state.finish(Operation.ANALYZE)

        if not self.state.is_current(Operation.ANALYZE, token) or self.state.selected_job_id != job.id:
            logger.debug(f"Dropping stale analysis for job {job.id}")
            return Outcome.STALE

        self.analysis = result
        self.activity.info(f"Analysis complete. Alignment: {result.match_score:.0f}%")
        return Outcome.COMPLETED

    async def analyze_job_by_id(self, job_id: str, tracked: bool = False) -> Outcome:
        return await self.analyze_job(self.find_job(job_id, tracked=tracked))

    async def refine_resume(self, instruction: str) -> Outcome:
        """Regenerate the resume tips of the resident analysis."""
        instruction = (instruction or "").strip()
        if not instruction or self.analysis is None or self.selected_job is None:
            return Outcome.SKIPPED
        if self.state.is_refining:
            return Outcome.SKIPPED

        token = self.state.begin(Operation.REFINE)
        original_tips = list(self.analysis.resume_tips)
        self.activity.info(f'Refining resume based on: "{instruction}"')
        try:
            refined = await self.agent.refine_resume(original_tips, self.selected_job, instruction)
        except AgentError as e:
            logger.warning(f"Refinement failed: {e}")
            self.activity.error("Refinement failed.")
            return Outcome.FAILED
        finally:
            self.state.finish(Operation.REFINE)

        if not self.state.is_current(Operation.REFINE, token) or self.analysis is None:
            logger.debug("Dropping stale refinement")
            return Outcome.STALE

        self.analysis = self.analysis.model_copy(update={"resume_tips": list(refined)})
        self.activity.info("Resume optimization updated.")
        return Outcome.COMPLETED

    async def send_chat_message(self, text: str) -> Outcome:
        """Send a chat message about the selected job.

        The user message is appended before the call; the reply only after
        it succeeds. A failed call leaves the user message unanswered.
        """
        if not (text or "").strip() or self.selected_job is None or self.analysis is None:
            return Outcome.SKIPPED
        if self.state.is_chatting:
            return Outcome.SKIPPED

        history = self.chat.history()
        self.chat.append_user(text)
        token = self.state.begin(Operation.CHAT)
        try:
            reply = await self.agent.send_message(history, text, self.selected_job, self.analysis)
        except AgentError as e:
            logger.warning(f"Chat failed: {e}")
            self.activity.error("Chat agent unavailable.")
            return Outcome.FAILED
        finally:
            self.state.finish(Operation.CHAT)

        if not self.state.is_current(Operation.CHAT, token):
            logger.debug("Dropping stale chat reply")
            return Outcome.STALE

        self.chat.append_model(reply)
        return Outcome.COMPLETED

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    def track_job(self, job: JobListing, status: TrackingStatus = TrackingStatus.INTERESTED) -> JobListing:
        snapshot = self.tracker.track(job, status)
        self.activity.info(f"{snapshot.company} status: {snapshot.tracking_status.value}.")
        return snapshot

    def track_job_by_id(self, job_id: str, status: TrackingStatus = TrackingStatus.INTERESTED) -> JobListing:
        return self.track_job(self.find_job(job_id), status)

    def set_tracking_status(self, job_id: str, status: TrackingStatus) -> JobListing:
        snapshot = self.tracker.set_status(job_id, status)
        self.activity.info(f"{snapshot.company} status: {snapshot.tracking_status.value}.")
        return snapshot

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def chat_history(self) -> List[ChatMessage]:
        return self.chat.history()

    def logs(self) -> List[str]:
        return self.activity.lines()

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            step=self.state.step,
            is_discovering=self.state.is_discovering,
            is_analyzing=self.state.is_analyzing,
            is_refining=self.state.is_refining,
            is_chatting=self.state.is_chatting,
            selected_job_id=self.state.visible_selected_job_id,
            job_count=len(self.jobs),
            visible_job_count=len(self.visible_jobs()),
            tracked_count=len(self.tracker),
            has_analysis=self.analysis is not None,
            chat_length=len(self.chat),
        )
