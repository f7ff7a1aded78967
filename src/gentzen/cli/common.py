"""Setup shared by the command-line entry points."""

import logging
from typing import Optional

from dotenv import load_dotenv

from gentzen.search import SearchStrategy, get_strategy
from gentzen.utils.config import Config, get_config


def load_settings(config_path: Optional[str] = None, verbose: bool = False) -> Config:
    """Load `.env`, read the configuration and configure logging."""
    load_dotenv()
    config = get_config(config_path)
    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    return config


def strategy_from_config(config: Config) -> SearchStrategy:
    return get_strategy(config.get("search.order"))
