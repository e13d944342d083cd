"""Option inheritance exports."""

from .option_merger import merge_options, resolve_option_chain
from .option_paths import (
    DEFAULT_ATOMIC_PATHS,
    ROOT_OPTION_SCOPE,
    AtomicOptionPaths,
    OptionPath,
    OptionPathError,
)

__all__ = [
    "DEFAULT_ATOMIC_PATHS",
    "ROOT_OPTION_SCOPE",
    "AtomicOptionPaths",
    "OptionPath",
    "OptionPathError",
    "merge_options",
    "resolve_option_chain",
]
