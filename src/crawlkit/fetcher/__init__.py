import logging
import os
from logging import NullHandler
from pathlib import Path

logging.getLogger(__name__).addHandler(NullHandler())

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0"

DEFAULT_AGENT_CONFIG_PATH = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "crawlkit" / "agents.json"

from crawlkit.fetcher.headers import Headers  # noqa: E402
from crawlkit.fetcher.user_agent import UserAgent, UserAgentBuilder, format_user_agent  # noqa: E402

__all__ = ["Headers", "UserAgent", "UserAgentBuilder", "format_user_agent", "__version__"]
