"""API route handlers."""

from .state import router as state_router
from .profile import router as profile_router
from .search import router as search_router
from .analysis import router as analysis_router
from .chat import router as chat_router
from .tracker import router as tracker_router
