import importlib
import os
from unittest.mock import patch

from jwksauthlib.utilities.logger import log_levels


def test_source_levels_follow_environment() -> None:
    env = {"LOG_LEVEL": "warning", "AUTH_LOG_LEVEL": "DEBUG", "CONFIG_LOG_LEVEL": "loud"}
    try:
        with patch.dict(os.environ, env, clear=True):
            reloaded = importlib.reload(log_levels)
            assert reloaded.GLOBAL_LOG_LEVEL == "WARNING"
            assert reloaded.SRC_LOG_LEVELS["AUTH"] == "DEBUG"
            # unknown level names fall back to the global level
            assert reloaded.SRC_LOG_LEVELS["CONFIG"] == "WARNING"
            assert reloaded.SRC_LOG_LEVELS["OPEN_TELEMETRY"] == "WARNING"
    finally:
        importlib.reload(log_levels)


def test_defaults_to_info() -> None:
    try:
        with patch.dict(os.environ, {}, clear=True):
            reloaded = importlib.reload(log_levels)
            assert set(reloaded.SRC_LOG_LEVELS.values()) == {"INFO"}
    finally:
        importlib.reload(log_levels)
