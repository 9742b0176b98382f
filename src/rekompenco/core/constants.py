"""Rekompenco constants: filesystem layout, record format, and exit codes."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    STORE_ERROR = 3


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

APP_DIR_NAME = "Rekompenco"
STORE_FILENAME = "default_rekompenco.rkpc"
CONFIG_FILENAME = "config.toml"

# ---------------------------------------------------------------------------
# Record format
# ---------------------------------------------------------------------------

FIELD_DELIMITER = "|"
FIELD_COUNT = 5  # id, name, description, data type, data
MAX_ENTRY_BYTES = 512  # enforced on write only
MAX_DATA_TYPE = 0xFFFF  # data type is an unsigned 16-bit tag
