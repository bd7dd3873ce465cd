import yaml
import os
import logging
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

from core.llm.openai_service import DEFAULT_BASE_URL, DEFAULT_MODEL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


class LlmConfig(BaseModel):
    base_url: Optional[str] = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_attempts: int = Field(default=3, ge=1)  # transport-level retries on transient errors
    request_timeout_seconds: float = 120.0


class AgentConfig(BaseModel):
    """Behaviour of the career pilot controller."""
    default_location: str = "Remote"
    discovery_count: int = Field(default=5, ge=1)
    activity_log_capacity: int = Field(default=50, ge=1)


class WebConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8080


class AppConfig(BaseModel):
    llm: LlmConfig = Field(default_factory=LlmConfig)
    agent: AgentConfig = Field(default_factory=AgentConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to the raw configuration."""
    # A section with every key commented out parses as None
    for section in ('llm', 'agent', 'web'):
        data[section] = data.get(section) or {}
    llm = data['llm']

    env_base_url = os.environ.get("LLM_BASE_URL")
    if env_base_url:
        llm['base_url'] = env_base_url

    # LLM_API_KEY wins; GEMINI_API_KEY is accepted for the default endpoint
    env_api_key = os.environ.get("LLM_API_KEY") or os.environ.get("GEMINI_API_KEY")
    if env_api_key:
        llm['api_key'] = env_api_key.strip()

    env_model = os.environ.get("LLM_MODEL")
    if env_model:
        llm['model'] = env_model

    if 'WEB_HOST' in os.environ:
        data['web']['host'] = os.environ['WEB_HOST']
    if 'WEB_PORT' in os.environ:
        data['web']['port'] = int(os.environ['WEB_PORT'])

    return data


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load configuration from YAML and apply environment overrides.

    A missing file is not an error: defaults are used. A file that is not
    valid YAML raises.
    """
    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info(f"Config file {config_path} not found, using defaults")

    data = _apply_env_overrides(data)
    return AppConfig(**data)
