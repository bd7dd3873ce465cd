"""
LLM Provider Interface - Abstract base for generation service providers.

The agent client talks to the generation service only through this
interface, so tests and alternative backends can swap the transport.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Any


class LLMProvider(ABC):
    """
    Abstract Interface for generation service providers (Gemini, OpenAI, Ollama, etc.).
    """

    @abstractmethod
    async def extract_structured_data(
        self,
        schema_spec: Dict,
        system_prompt: str,
        user_message: str,
    ) -> Dict[str, Any]:
        """
        Run one request whose reply must be JSON adhering to a schema.

        Args:
            schema_spec: Either a wrapped spec {'name', 'strict', 'schema'} or raw JSON schema
            system_prompt: Instruction for the model
            user_message: The request itself

        Returns:
            The parsed JSON object
        """
        pass

    @abstractmethod
    async def generate_reply(self, system_prompt: str, messages: List[Dict[str, str]]) -> str:
        """
        Run one conversational turn.

        Args:
            system_prompt: Instruction for the model
            messages: Prior turns plus the new user turn, as
                {'role': 'user'|'assistant', 'content': str} dicts

        Returns:
            The model's reply text (may be empty)
        """
        pass
