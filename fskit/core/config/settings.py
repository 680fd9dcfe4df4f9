# File: fskit/core/config/settings.py

import os
import logging


class Settings:
    # --- File I/O ---
    FILE_ENCODING: str = os.getenv("FSKIT_FILE_ENCODING", "utf-8")
    JSON_INDENT: int = int(os.getenv("FSKIT_JSON_INDENT", "2"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FSKIT_LOG_LEVEL", "WARNING").upper()

    def configure_logging(self):
        """Applies LOG_LEVEL to the fskit logger hierarchy (never the root logger)."""
        level = logging.getLevelName(self.LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.WARNING
        logging.getLogger("fskit").setLevel(level)
        return level


settings = Settings()
