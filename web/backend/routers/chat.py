#!/usr/bin/env python3
"""
Chat endpoints - conversation about the selected job.
"""

import logging
from fastapi import APIRouter, Depends

from pipeline.controller import CareerPilotController
from pipeline.state import Outcome
from ..dependencies import get_controller
from ..models.requests import ChatRequest
from ..models.responses import ChatResponse
from ..utils import outcome_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.get("", response_model=ChatResponse)
async def get_chat(controller: CareerPilotController = Depends(get_controller)):
    """Get the chat transcript, oldest message first."""
    return ChatResponse(
        success=True,
        outcome=Outcome.COMPLETED,
        message=f"{len(controller.chat)} messages.",
        messages=controller.chat_history()
    )


@router.post("", response_model=ChatResponse)
async def send_message(
    request: ChatRequest,
    controller: CareerPilotController = Depends(get_controller)
):
    """
    Send a message about the selected job.
    
    Needs a resident analysis. Blank messages are ignored. The user message
    stays in the transcript even when the agent call fails.
    """
    outcome = await controller.send_chat_message(request.text)
    return ChatResponse(
        success=outcome == Outcome.COMPLETED,
        outcome=outcome,
        message=outcome_message(outcome, "Reply received."),
        messages=controller.chat_history()
    )
