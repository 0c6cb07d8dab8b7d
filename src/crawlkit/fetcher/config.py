import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

from crawlkit.fetcher import DEFAULT_AGENT_CONFIG_PATH
from crawlkit.fetcher.user_agent import DEFAULT_BROWSER_VERSION, DEFAULT_CRAWLER_VERSION, UserAgent

logger = logging.getLogger(__name__)

ENV_PREFIX = "CRAWLKIT_"


@dataclass
class AgentProfile:
    name: str
    agent_name: str
    email_address: Optional[str] = None
    web_address: Optional[str] = None
    browser_version: str = DEFAULT_BROWSER_VERSION
    crawler_version: Optional[str] = DEFAULT_CRAWLER_VERSION
    user_agent_string: Optional[str] = None

    def to_user_agent(self) -> UserAgent:
        return UserAgent(
            agent_name=self.agent_name,
            email_address=self.email_address,
            web_address=self.web_address,
            browser_version=self.browser_version,
            crawler_version=self.crawler_version,
            user_agent_string=self.user_agent_string,
        )


@dataclass
class AgentConfig:
    agents: dict = field(default_factory=dict)
    default_agent: Optional[str] = None


def load_agent_config(path: Union[str, os.PathLike] = DEFAULT_AGENT_CONFIG_PATH) -> AgentConfig:
    """Load agent profiles from JSON file. Returns empty AgentConfig if file doesn't exist."""
    expanded = Path(path).expanduser()
    if not expanded.exists():
        logger.debug(f"No agent config at {expanded}")
        return AgentConfig()

    data = json.loads(expanded.read_text())

    agents = {}
    for name, agent_data in data.get("agents", {}).items():
        agents[name] = AgentProfile(
            name=name,
            agent_name=agent_data["agent_name"],
            email_address=agent_data.get("email_address"),
            web_address=agent_data.get("web_address"),
            browser_version=agent_data.get("browser_version", DEFAULT_BROWSER_VERSION),
            crawler_version=agent_data.get("crawler_version", DEFAULT_CRAWLER_VERSION),
            user_agent_string=agent_data.get("user_agent_string"),
        )

    logger.debug(f"Loaded {len(agents)} agent profile(s) from {expanded}")
    return AgentConfig(
        agents=agents,
        default_agent=data.get("default_agent"),
    )


def user_agent_from_env(environ: Mapping[str, str] = os.environ) -> Optional[UserAgent]:
    """Build a UserAgent from CRAWLKIT_* environment variables.

    Returns None unless CRAWLKIT_AGENT_NAME is set.
    """
    agent_name = environ.get(f"{ENV_PREFIX}AGENT_NAME")
    if not agent_name:
        return None

    return UserAgent(
        agent_name=agent_name,
        email_address=environ.get(f"{ENV_PREFIX}EMAIL_ADDRESS"),
        web_address=environ.get(f"{ENV_PREFIX}WEB_ADDRESS"),
        browser_version=environ.get(f"{ENV_PREFIX}BROWSER_VERSION", DEFAULT_BROWSER_VERSION),
        crawler_version=environ.get(f"{ENV_PREFIX}CRAWLER_VERSION", DEFAULT_CRAWLER_VERSION),
        user_agent_string=environ.get(f"{ENV_PREFIX}USER_AGENT_STRING"),
    )


def resolve_agent(
    config: AgentConfig,
    name: Optional[str] = None,
    environ: Mapping[str, str] = os.environ,
) -> UserAgent:
    """Resolve which user agent to crawl with.

    Resolution order:
    1. Explicit profile name (--agent flag)
    2. default_agent from config
    3. CRAWLKIT_* environment variables
    """
    # Explicit profile name
    if name:
        if name not in config.agents:
            raise ValueError(f"Unknown agent profile: {name}")
        return config.agents[name].to_user_agent()

    # Default profile fallback
    if config.default_agent and config.default_agent in config.agents:
        return config.agents[config.default_agent].to_user_agent()

    from_env = user_agent_from_env(environ)
    if from_env is not None:
        return from_env

    raise ValueError(f"No agent profile configured and {ENV_PREFIX}AGENT_NAME is not set")
