"""
Generation settings.

Everything has a default, so GenerationConfig() reproduces the standard
mapping (integer -> Integer, "date-time"/"date" recognised as formatted
dates).
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

import yaml


DEFAULT_DATE_TIME_FORMATS = ("date-time", "date")


@dataclass(frozen=True)
class GenerationConfig:
    """
    Properties:
        use_long_integers:
            Map "integer" to Long instead of Integer
        date_time_formats:
            Named formats parsed as ISO-8601 dates. Any format containing
            a strftime directive ("%Y-%m-%d") is always recognised.
    """

    use_long_integers: bool = False
    date_time_formats: Tuple[str, ...] = DEFAULT_DATE_TIME_FORMATS

    def is_date_time_format(self, fmt: Optional[str]) -> bool:
        if not fmt or not isinstance(fmt, str):
            return False
        return fmt in self.date_time_formats or "%" in fmt


def config_from_dict(d: Optional[Dict[str, Any]]) -> GenerationConfig:
    """
    Build a GenerationConfig from a plain dict.

    Raises:
        ValueError: On unknown keys
    """
    if not d:
        return GenerationConfig()
    known = {f.name for f in fields(GenerationConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ValueError(f"Unknown generation settings: {unknown}")

    kwargs: Dict[str, Any] = {}
    if "use_long_integers" in d:
        kwargs["use_long_integers"] = bool(d["use_long_integers"])
    if "date_time_formats" in d:
        formats = d["date_time_formats"]
        if isinstance(formats, str):
            formats = [formats]
        kwargs["date_time_formats"] = tuple(formats)
    return GenerationConfig(**kwargs)


def config_from_yaml(s: str) -> GenerationConfig:
    return config_from_dict(yaml.safe_load(s))
