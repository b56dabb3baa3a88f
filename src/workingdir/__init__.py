from __future__ import annotations

from .domain.directory import Dir, PathLike, normalize_path, split_components
from .domain.include_set import IncludeSet, find_include
from .infra.fs import WorkingDir

__version__ = "1.0.0"

__all__ = [
    "Dir",
    "PathLike",
    "IncludeSet",
    "WorkingDir",
    "find_include",
    "normalize_path",
    "split_components",
]
