from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

OUTPUT_FORMATS = ("text", "json")


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for the readability command line."""

    encoding: str = "utf-8"
    echo_text: bool = True
    default_choice: str | None = None
    output_format: str = "text"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}; "
                f"got '{self.output_format}'."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return ReadabilityConfig()
    allowed = {field.name for field in fields(ReadabilityConfig)}
    return ReadabilityConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
