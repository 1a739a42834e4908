from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings read from the environment (a `.env` file is loaded by the app).

    Fields
    ------
    offline_mode : bool
        When true (the default), services never call the LLM.
    openai_api_key : str
        Empty string means "no key"; services fall back to local behavior.
    model_name : str
        Chat model used by the hint service.
    log_level : str
        Name of the root log level, e.g. "INFO" or "DEBUG".
    """

    offline_mode: bool = True
    openai_api_key: str = ""
    model_name: str = "gpt-4o-mini"
    log_level: str = "INFO"

    @property
    def llm_enabled(self) -> bool:
        return not self.offline_mode and bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            offline_mode=os.getenv("OFFLINE_MODE", "true").lower() == "true",
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            model_name=os.getenv("MODEL_NAME", "gpt-4o-mini"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single console handler to the package logger."""
    logger = logging.getLogger("unscramble")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Streamlit re-runs the script on every interaction; avoid stacking handlers.
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)
    return logger
