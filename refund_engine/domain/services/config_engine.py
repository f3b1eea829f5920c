"""
CONFIG ENGINE
Load, validate, and expose refund rule configuration

RESPONSIBILITIES:
- Load YAML configuration files (timezones.yml, rules.yml)
- Validate configuration integrity
- Expose a read-only RefundRules object

RULES:
❌ No fallback timezone
✅ Fail fast on invalid config
✅ Deterministic output
"""

import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Dict, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from refund_engine.config import settings
from refund_engine.domain.models import (
    RefundRules,
    RequestSource,
    TimezoneProfile,
    TosCohort,
)

logger = logging.getLogger(__name__)


class ConfigEngine:
    """
    Configuration Engine
    Single source of truth for refund policy configuration
    """

    def __init__(self, config_dir: Path):
        """Initialize with config directory"""
        self.config_dir = Path(config_dir)
        self._timezones: Dict[str, TimezoneProfile] = None
        self._rules: RefundRules = None

    def load_all(self) -> None:
        """Load all configuration files"""
        self._load_timezones()
        self._load_rules()
        logger.info(
            "REFUND_CONFIG_LOADED | dir=%s timezones=%d",
            self.config_dir,
            len(self._timezones),
        )

    def _read_yaml(self, filename: str) -> dict:
        path = self.config_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config format in {path}. Expected a mapping.")
        return data

    def _load_timezones(self) -> None:
        """Load customer timezone table from timezones.yml"""
        data = self._read_yaml("timezones.yml")

        timezones: Dict[str, TimezoneProfile] = {}
        for entry in data.get('timezones', []):
            profile = TimezoneProfile(
                label=entry['label'],
                iana_zone=entry['iana_zone'],
                date_format=entry['date_format'],
            )
            if profile.label in timezones:
                raise ValueError(f"Duplicate timezone label: {profile.label}")
            self._check_zone(profile.iana_zone)
            timezones[profile.label] = profile

        if not timezones:
            raise ValueError("No timezones configured")

        self._timezones = timezones

    def _load_rules(self) -> None:
        """Load operating rules from rules.yml"""
        data = self._read_yaml("rules.yml")

        operating_timezone = data['operating_timezone']
        self._check_zone(operating_timezone)

        effective_at = data['terms_of_service']['new_terms_effective_at']
        if not isinstance(effective_at, datetime):
            # YAML only yields datetime for unquoted timestamps
            effective_at = datetime.fromisoformat(str(effective_at))

        hours = data['business_hours']
        self._rules = RefundRules(
            timezones=self._timezones,
            refund_windows=self._parse_windows(data['refund_windows']),
            new_terms_effective_at=effective_at,
            operating_timezone=operating_timezone,
            open_hour=int(hours['open_hour']),
            close_hour=int(hours['close_hour']),
            time_format=data.get('time_format', "%H:%M"),
        )

    def _parse_windows(self, raw: dict) -> Dict[RequestSource, Dict[TosCohort, int]]:
        windows: Dict[RequestSource, Dict[TosCohort, int]] = {}
        for source_label, cohorts in raw.items():
            try:
                source = RequestSource(source_label)
            except ValueError:
                raise ValueError(f"Unknown request source in refund_windows: {source_label}")
            windows[source] = {
                TosCohort(cohort_label): int(hours)
                for cohort_label, hours in cohorts.items()
            }
        return windows

    @staticmethod
    def _check_zone(name: str) -> None:
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown IANA timezone in config: {name}")

    # Public getters

    @property
    def timezones(self) -> Dict[str, TimezoneProfile]:
        """Get timezone table keyed by customer-facing label"""
        if self._timezones is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._timezones

    @property
    def timezone_labels(self) -> List[str]:
        return list(self.timezones.keys())

    @property
    def rules(self) -> RefundRules:
        """Get refund rules"""
        if self._rules is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._rules


@lru_cache(maxsize=1)
def get_default_rules() -> RefundRules:
    """Rules loaded once from the configured (or packaged) config directory"""
    engine = ConfigEngine(settings.config_dir)
    engine.load_all()
    return engine.rules
