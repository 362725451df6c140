"""
Environment settings loaded from .env file.
"""
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# --- Pipeline ---
COALESCE_BETWEEN_STAGES: bool = os.getenv("COALESCE_BETWEEN_STAGES", "true").lower() == "true"
VECTORIZED_POINT_LOOKUP: bool = os.getenv("VECTORIZED_POINT_LOOKUP", "true").lower() == "true"
DEFAULT_SEED_MODE: str = os.getenv("DEFAULT_SEED_MODE", "point")


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for entry-point callers; library modules never call this."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
