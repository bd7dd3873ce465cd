"""
Pipeline state: the current step, per-operation loading flags and
per-operation generation counters.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional


class PipelineStep(str, Enum):
    PROFILE = "Profile"
    SEARCH = "Search"
    ANALYSIS = "Analysis"
    TRACKER = "Tracker"


class Operation(str, Enum):
    """Remote operation categories. Each has its own flag and counter."""
    DISCOVER = "discover"
    ANALYZE = "analyze"
    REFINE = "refine"
    CHAT = "chat"


# Plain navigation moves. Entering ANALYSIS needs an analyze request and
# leaving PROFILE for SEARCH needs a discovery run, so neither is listed.
NAVIGATION: Dict[PipelineStep, FrozenSet[PipelineStep]] = {
    PipelineStep.PROFILE: frozenset({PipelineStep.TRACKER}),
    PipelineStep.SEARCH: frozenset({PipelineStep.PROFILE, PipelineStep.TRACKER}),
    PipelineStep.ANALYSIS: frozenset({PipelineStep.PROFILE, PipelineStep.SEARCH, PipelineStep.TRACKER}),
    PipelineStep.TRACKER: frozenset({PipelineStep.PROFILE, PipelineStep.SEARCH}),
}


def can_navigate(current: PipelineStep, target: PipelineStep) -> bool:
    return target == current or target in NAVIGATION[current]


@dataclass
class PipelineState:
    step: PipelineStep = PipelineStep.PROFILE
    loading: Dict[Operation, bool] = field(default_factory=lambda: {op: False for op in Operation})
    generations: Dict[Operation, int] = field(default_factory=lambda: {op: 0 for op in Operation})
    selected_job_id: Optional[str] = None

    def is_loading(self, op: Operation) -> bool:
        return self.loading[op]

    def begin(self, op: Operation) -> int:
        """Mark an operation in flight and return its generation token."""
        self.loading[op] = True
        self.generations[op] += 1
        return self.generations[op]

    def finish(self, op: Operation) -> None:
        self.loading[op] = False

    def is_current(self, op: Operation, token: int) -> bool:
        return self.generations[op] == token

    def invalidate(self, op: Operation) -> None:
        """Bump a counter so any in-flight completion of this kind is dropped."""
        self.generations[op] += 1

    @property
    def is_discovering(self) -> bool:
        return self.loading[Operation.DISCOVER]

    @property
    def is_analyzing(self) -> bool:
        return self.loading[Operation.ANALYZE]

    @property
    def is_refining(self) -> bool:
        return self.loading[Operation.REFINE]

    @property
    def is_chatting(self) -> bool:
        return self.loading[Operation.CHAT]

    @property
    def visible_selected_job_id(self) -> Optional[str]:
        """Selected job id, reported only while on the analysis step."""
        return self.selected_job_id if self.step == PipelineStep.ANALYSIS else None


class Outcome(str, Enum):
    """What a controller operation did."""
    COMPLETED = "completed"  # call succeeded and its result was applied
    FAILED = "failed"        # call raised AgentError; logged, state untouched
    SKIPPED = "skipped"      # rejected by a guard; no call was made
    STALE = "stale"          # call succeeded but its context moved on; result dropped
