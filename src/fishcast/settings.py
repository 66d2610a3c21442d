"""
Runtime settings for fishcast.

Values come from the environment (optionally a .env file) so the engine can be
pointed at an alternative config directory without code changes.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment
load_dotenv()

DEFAULT_CONFIG_DIR = Path(__file__).parent / "config"


def get_config_dir() -> Path:
    """Directory holding scoring.yaml, regions.yaml, catalog.yaml and species/."""
    return Path(os.getenv('FISHCAST_CONFIG_DIR', str(DEFAULT_CONFIG_DIR)))


def configure_logging(level: str = None) -> None:
    """
    Configure root logging for scripts and services embedding the engine.

    Args:
        level: Log level name; defaults to FISHCAST_LOG_LEVEL or INFO
    """
    logging.basicConfig(
        level=level or os.getenv('FISHCAST_LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
