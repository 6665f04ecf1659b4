# entity_matcher/engine/utils/__init__.py
"""

Does: Provide JSON config loading and topic-filtered debug tracing for the engine.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Options loader, sample data, run driver, CLI demo and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
