from __future__ import annotations

"""
Include-Set Search Domain.

Models an ordered set of include directories and the first-match lookup
used by include resolution: each directory, in order, joins the requested
file and answers whether the joined candidate is lexically inside it.
An optional existence predicate turns the lexical search into a real
lookup without this module performing any I/O itself.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from workingdir.domain.directory import Dir, PathLike

logger = logging.getLogger(__name__)

ExistsPredicate = Callable[[str], bool]


# -----------------------------------------------------------------------------
# DATA MODEL
# -----------------------------------------------------------------------------

class IncludeSet:
    """
    Ordered, immutable collection of include directories.

    Duplicate directories are dropped, keeping the first occurrence so the
    search order stays the one the caller gave.
    """

    __slots__ = ("_dirs",)

    def __init__(self, dirs: Iterable[PathLike] = ()) -> None:
        seen = set()
        ordered: List[Dir] = []
        for entry in dirs:
            d = Dir(entry)
            if d in seen:
                continue
            seen.add(d)
            ordered.append(d)
        self._dirs: Tuple[Dir, ...] = tuple(ordered)

    @property
    def dirs(self) -> Tuple[Dir, ...]:
        return self._dirs

    def sorted_dirs(self) -> List[Dir]:
        """Directories in deterministic lexicographic order."""
        return sorted(self._dirs)

    def find(self, file: PathLike, exists: Optional[ExistsPredicate] = None) -> Optional[str]:
        return find_include(self._dirs, file, exists=exists)

    def __iter__(self) -> Iterator[Dir]:
        return iter(self._dirs)

    def __len__(self) -> int:
        return len(self._dirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncludeSet):
            return NotImplemented
        return self._dirs == other._dirs

    def __hash__(self) -> int:
        return hash(self._dirs)

    def __repr__(self) -> str:
        return f"IncludeSet({list(self._dirs)!r})"


# -----------------------------------------------------------------------------
# SEARCH API
# -----------------------------------------------------------------------------

def find_include(
        include_set: Iterable[PathLike],
        file: PathLike,
        exists: Optional[ExistsPredicate] = None,
) -> Optional[str]:
    """
    Resolve a file against an ordered sequence of include directories.

    For every directory in order, the file is joined onto it. The joined
    candidate is accepted when the directory lexically contains it and,
    if a predicate is supplied, when the predicate reports it as present.

    Args:
        include_set: Directories in search order (any path-like values).
        file: File to look up, usually relative.
        exists: Optional predicate such as os.path.isfile.

    Returns:
        Optional[str]: The first accepted joined path, or None.
    """
    dirs = [Dir(entry) for entry in include_set]
    for directory in dirs:
        candidate = directory.join(file)

        if not directory.contains(candidate):
            logger.debug(f"Skipping {directory!r}: {candidate} lies outside it.")
            continue

        if exists is not None and not exists(candidate):
            logger.debug(f"Not found in {directory!r}: {candidate}")
            continue

        logger.debug(f"Resolved '{file}' to {candidate}")
        return candidate

    logger.debug(f"Unable to resolve '{file}' in {len(dirs)} directories.")
    return None
