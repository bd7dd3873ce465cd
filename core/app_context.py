from dataclasses import dataclass

from core.agent import CareerAgent
from core.config_loader import AppConfig, LlmConfig
from core.llm.openai_service import OpenAIService
from pipeline.controller import CareerPilotController


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Provides a single source of truth for service instantiation. Each
    controller owns its own state; build one per user session.
    """
    config: AppConfig
    ai_service: OpenAIService
    agent: CareerAgent

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        ai_service = cls._build_ai_service(config.llm)
        agent = CareerAgent(ai_service, discovery_count=config.agent.discovery_count)
        return cls(config=config, ai_service=ai_service, agent=agent)

    @staticmethod
    def _build_ai_service(llm_config: LlmConfig) -> OpenAIService:
        """Build OpenAI-compatible service from LLM configuration."""
        model_config = {
            'model': llm_config.model,
            'temperature': llm_config.temperature,
            'max_attempts': llm_config.max_attempts,
            'request_timeout_seconds': llm_config.request_timeout_seconds,
        }

        return OpenAIService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model_config=model_config,
        )

    def new_controller(self) -> CareerPilotController:
        """Create a controller with a fresh, empty application state."""
        return CareerPilotController(
            self.agent,
            default_location=self.config.agent.default_location,
            log_capacity=self.config.agent.activity_log_capacity,
        )
