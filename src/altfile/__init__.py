"""Jump between related files of a Phoenix style Elixir project.

The package converts a file path into the path of an alternate file (its
test, controller, view, LiveView and so on), maps paths to module names and
back, and renders small source stubs for files that do not exist yet. The
conversion helpers are pure and can be used programmatically or through the
command line interface.
"""

from __future__ import annotations

from .config import Configuration, EditorSettings, FileExtensions, PathFormats, TemplateOptions
from .errors import ConfigurationError, ConversionError, InvalidPathError, UnsupportedConversionError
from .kinds import TargetKind
from .naming import (
    module_name_to_path,
    path_to_module_name,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from .resolver import ConversionResult, PathConventionResolver, convert_path
from .stubs import StubGenerator, generate_stub

__all__ = [
    "Configuration",
    "ConfigurationError",
    "ConversionError",
    "ConversionResult",
    "EditorSettings",
    "FileExtensions",
    "InvalidPathError",
    "PathConventionResolver",
    "PathFormats",
    "StubGenerator",
    "TargetKind",
    "TemplateOptions",
    "UnsupportedConversionError",
    "convert_path",
    "generate_stub",
    "module_name_to_path",
    "path_to_module_name",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
]

__version__ = "0.1.0"
