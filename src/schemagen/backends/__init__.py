"""Backends for schemagen output generation (Python dataclasses)."""

from .dataclass_generator import generate_module, render_value, save_module_file

__all__ = ["generate_module", "render_value", "save_module_file"]
