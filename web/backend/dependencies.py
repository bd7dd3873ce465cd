#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The API serves one user session per process, so a single controller is
created lazily and shared by every request.
"""

import logging
from functools import lru_cache
from typing import Optional

from core.app_context import AppContext
from core.config_loader import AppConfig, load_config
from pipeline.controller import CareerPilotController

logger = logging.getLogger(__name__)


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.
    
    Returns:
        AppConfig: The application configuration.
    """
    return load_config()


class ControllerManager:
    """Owns the process-wide controller."""

    def __init__(self):
        self._context: Optional[AppContext] = None
        self._controller: Optional[CareerPilotController] = None

    def get_controller(self) -> CareerPilotController:
        if self._controller is None:
            if self._context is None:
                self._context = AppContext.build(get_config())
            self._controller = self._context.new_controller()
            logger.info("Created career pilot controller")
        return self._controller


# Global controller manager instance
_manager = ControllerManager()


def get_controller() -> CareerPilotController:
    """
    FastAPI dependency that returns the shared controller.
    
    Usage:
        @router.get("/endpoint")
        def my_endpoint(controller: CareerPilotController = Depends(get_controller)):
            ...
    """
    return _manager.get_controller()
