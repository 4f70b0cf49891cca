import logging
import os
from typing import Dict, List

LOG_SOURCES: List[str] = ["AUTH", "CONFIG", "OPEN_TELEMETRY"]

_VALID_LEVELS = logging.getLevelNamesMapping()

GLOBAL_LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "").upper()
if GLOBAL_LOG_LEVEL not in _VALID_LEVELS:
    GLOBAL_LOG_LEVEL = "INFO"

# per-source override via <SOURCE>_LOG_LEVEL, e.g. AUTH_LOG_LEVEL=DEBUG
SRC_LOG_LEVELS: Dict[str, str] = {}

for source in LOG_SOURCES:
    log_env_var = source + "_LOG_LEVEL"
    SRC_LOG_LEVELS[source] = os.environ.get(log_env_var, "").upper()
    if SRC_LOG_LEVELS[source] not in _VALID_LEVELS:
        SRC_LOG_LEVELS[source] = GLOBAL_LOG_LEVEL
