"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .domain.exceptions import ConfigurationError
from .domain.models import (
    DEFAULT_FORMAT,
    DEFAULT_LOCALE,
    DEFAULT_NUMBERING_SYSTEM,
    DEFAULT_TIMEZONE,
    AvailabilityConstraint,
    Granularity,
    LocaleOptions,
    TimeFormat,
    TimeValue,
)
from .domain.normalizer import normalize
from .domain.time_model import from_hour_minute


class TimepickerOptions(BaseModel):
    """Locale and clock options requested by the picker."""
    locale: Optional[str] = DEFAULT_LOCALE
    numbering_system: Optional[str] = DEFAULT_NUMBERING_SYSTEM
    output_calendar: Optional[str] = None
    default_to_en: bool = False
    format: TimeFormat = DEFAULT_FORMAT

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v):
        """Accept 12/24 as plain numbers or strings."""
        if isinstance(v, TimeFormat):
            return v
        try:
            return TimeFormat(int(v))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"format must be 12 or 24, got {v!r}") from exc


class ConstraintConfig(BaseModel):
    """Selectable range and step."""
    min_time: Optional[str] = None
    max_time: Optional[str] = None
    granularity: Granularity = Granularity.MINUTES
    minutes_gap: Optional[int] = None

    @field_validator("min_time", "max_time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        """Store bounds in canonical HH:mm form."""
        if v is None:
            return v
        canonical = normalize(v)
        if canonical is None or int(canonical[:2]) > 23 or int(canonical[3:]) > 59:
            raise ValueError(f"Not a valid time of day: {v!r}")
        return canonical

    @field_validator("minutes_gap")
    @classmethod
    def validate_minutes_gap(cls, v: Optional[int]) -> Optional[int]:
        """Validate the step is between 1 and 59 minutes."""
        if v is not None and not 1 <= v <= 59:
            raise ValueError(f"minutes_gap must be between 1 and 59, got {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "ConstraintConfig":
        """Ensure min is not after max and both sit on the minutes grid."""
        if self.min_time and self.max_time and self.min_time > self.max_time:
            raise ValueError("min_time must not be later than max_time")
        if self.minutes_gap:
            for bound in (self.min_time, self.max_time):
                if bound and int(bound[3:]) % self.minutes_gap != 0:
                    raise ValueError(
                        f"{bound} is not aligned to minutes_gap {self.minutes_gap}"
                    )
        return self

    def to_constraint(self, timezone: str = DEFAULT_TIMEZONE) -> AvailabilityConstraint:
        """Build the domain constraint, anchoring bounds to today."""
        return AvailabilityConstraint(
            min=_bound(self.min_time, timezone),
            max=_bound(self.max_time, timezone),
            granularity=self.granularity,
            minutes_gap=self.minutes_gap
        )


def _bound(value: Optional[str], timezone: str) -> Optional[TimeValue]:
    if value is None:
        return None
    hours, minutes = value.split(":")
    return from_hour_minute(int(hours), int(minutes), LocaleOptions(), timezone=timezone)


class AppConfig(BaseModel):
    """Application configuration."""
    options: TimepickerOptions = Field(default_factory=TimepickerOptions)
    constraints: ConstraintConfig = Field(default_factory=ConstraintConfig)
    timezone: str = DEFAULT_TIMEZONE

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject timezone names pendulum cannot load."""
        try:
            pendulum.timezone(v)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {v!r}") from exc
        return v

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a timepicker.yaml file. See timepicker.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration in {config_path}:\n{exc}") from exc

    @classmethod
    def load_or_default(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """Load the given or default config file, falling back to defaults if absent."""
        path = config_path or get_default_config_path()
        if config_path is None and not path.exists():
            return cls()
        return cls.load_from_yaml(path)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for timepicker.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "timepicker.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "timepicker.yaml"

    return config_path
