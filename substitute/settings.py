"""Rotator options.

Options can be given in snake_case or with the camelCase names used by
the widget's public option object (``containerId``, ``mobileWidth``,
``clearOriginalContent``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from substitute.errors import ConfigurationError


class SubSettings(BaseModel):
    """Validated rotator configuration."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    container_id: str = Field(default="sub", min_length=1, description="Mount point identifier.")
    namespace: str = Field(default="sub", min_length=1, description="Prefix for every class label.")
    interval: int = Field(default=5000, gt=0, description="Milliseconds between sentence changes.")
    speed: int = Field(default=200, gt=0, description="Milliseconds per animation step.")
    mobile_width: int | None = Field(default=None, gt=0, description="Pause below this viewport width.")
    verbose: bool = Field(
        default=False,
        description="Log planning and animation at DEBUG; the host application configures logging handlers.",
    )
    random: bool = False
    best: bool = True
    clear_original_content: bool = True

    @property
    def interval_seconds(self) -> float:
        return self.interval / 1000

    @property
    def speed_seconds(self) -> float:
        return self.speed / 1000


def load_settings(options: Mapping[str, Any] | None = None) -> SubSettings:
    """Validate an option mapping into :class:`SubSettings`.

    Raises
    ------
    ConfigurationError
        If any option is unknown or has an invalid value.
    """
    try:
        return SubSettings.model_validate(dict(options or {}))
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_errors(exc.errors())) from exc


def _format_validation_errors(entries: list[Any]) -> str:
    details: list[str] = []
    for entry in entries:
        location = ".".join(str(part) for part in entry.get("loc") or ())
        message = str(entry.get("msg") or "Invalid value")
        prefix = f"{location}: " if location else ""
        details.append(f"- {prefix}{message}")
    return "Invalid rotator options:\n" + "\n".join(details)
