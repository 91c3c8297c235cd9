"""CLI utilities and helpers."""

from .console import (
    FaultlineConsole,
    availability_style,
    format_error,
    format_info,
    format_outcome,
    format_success,
    format_warning,
)
from .file_utils import atomic_write_json
from .json_utils import json_serializer

__all__ = [
    "FaultlineConsole",
    "availability_style",
    "format_error",
    "format_info",
    "format_outcome",
    "format_success",
    "format_warning",
    "atomic_write_json",
    "json_serializer",
]
