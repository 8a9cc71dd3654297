"""
Settings for the transaction analytics report.

This module loads settings from settings.yaml for easy configuration
without code changes. Environment variables (TRANSACTIONS_FILE,
LOG_LEVEL) override the file.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from txn_analytics.models import parse_date

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTIONS_FILE = "transactions.json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ReportSettings:
    """Query parameters used by the console report."""
    year: int = 2019
    month: int = 1
    range_start: date = date(2019, 1, 1)
    range_end: date = date(2019, 1, 2)
    before_date: date = date(2019, 1, 1)
    lookup_id: str = "2"


@dataclass(frozen=True)
class Settings:
    """
    Resolved application settings.

    Attributes:
        transactions_file: Path to the transactions JSON file
        log_level: Logging level name, e.g. "INFO"
        report: Parameters for the console report
    """
    transactions_file: str = DEFAULT_TRANSACTIONS_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    report: ReportSettings = field(default_factory=ReportSettings)


def _get_config_file() -> Optional[Path]:
    """
    Determine which settings file to use.

    Priority:
    1. settings.yaml (user's custom config, gitignored)
    2. settings.yaml.example (template/fallback)

    Returns:
        Path to the config file, or None if neither exists
    """
    config_dir = Path(__file__).parent

    # Priority 1: User's custom settings.yaml
    custom_config = config_dir / "settings.yaml"
    if custom_config.exists():
        return custom_config

    # Priority 2: Example file (template/fallback)
    example_config = config_dir / "settings.yaml.example"
    if example_config.exists():
        logger.warning(
            "Using settings.yaml.example - copy it to settings.yaml to customize"
        )
        return example_config

    return None


def _load_config(config_file: Path) -> Dict[str, Any]:
    """
    Load settings from a YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed
    """
    with open(config_file, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    logger.info(f"Loaded settings from {config_file.name}")
    return config


def _parse_report(data: Dict[str, Any]) -> ReportSettings:
    defaults = ReportSettings()
    try:
        return ReportSettings(
            year=int(data.get('year', defaults.year)),
            month=int(data.get('month', defaults.month)),
            range_start=parse_date(data.get('range_start', defaults.range_start)),
            range_end=parse_date(data.get('range_end', defaults.range_end)),
            before_date=parse_date(data.get('before_date', defaults.before_date)),
            lookup_id=str(data.get('lookup_id', defaults.lookup_id)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid report settings: {e}") from e


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """
    Resolve settings from YAML and environment variables.

    Args:
        config_file: Explicit YAML file; defaults to config/settings.yaml
            or its .example fallback

    Returns:
        Settings instance (defaults when no YAML file exists)

    Raises:
        ValueError: If the report block holds invalid dates or numbers
    """
    path = config_file if config_file is not None else _get_config_file()
    config = _load_config(path) if path is not None else {}

    transactions_file = os.environ.get(
        'TRANSACTIONS_FILE',
        config.get('transactions_file', DEFAULT_TRANSACTIONS_FILE),
    )
    log_level = os.environ.get(
        'LOG_LEVEL',
        config.get('log_level', DEFAULT_LOG_LEVEL),
    )

    return Settings(
        transactions_file=str(transactions_file),
        log_level=str(log_level).upper(),
        report=_parse_report(config.get('report') or {}),
    )
