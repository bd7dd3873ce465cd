#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Dict

from pipeline.state import Outcome

_DEFAULT_MESSAGES: Dict[Outcome, str] = {
    Outcome.FAILED: "Agent call failed; see the activity log.",
    Outcome.SKIPPED: "Request ignored: preconditions not met or operation already in progress.",
    Outcome.STALE: "Result discarded: the selection changed while the call was in flight.",
}


def outcome_message(outcome: Outcome, completed: str) -> str:
    """
    Describe an operation outcome for an API response.

    Args:
        outcome: What the controller operation did.
        completed: Message to use when the operation completed.

    Returns:
        Human-readable message.
    """
    if outcome == Outcome.COMPLETED:
        return completed
    return _DEFAULT_MESSAGES[outcome]
