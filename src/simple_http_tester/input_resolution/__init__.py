"""Input resolution domain exports."""

from .input_resolver import (
    SourceAccessError,
    expand_glob_patterns,
    read_source_content,
    resolve_input_sources,
)
from .source_models import STDIN_SOURCE, InputResolution

__all__ = [
    "STDIN_SOURCE",
    "InputResolution",
    "SourceAccessError",
    "expand_glob_patterns",
    "read_source_content",
    "resolve_input_sources",
]
