"""Pipeline state and controller modules for Career Pilot."""

from .controller import CareerPilotController, ControllerSnapshot
from .state import Operation, Outcome, PipelineStep

__all__ = ['CareerPilotController', 'ControllerSnapshot', 'Operation', 'Outcome', 'PipelineStep']
