from __future__ import annotations

"""
Directory Value Domain Model.

Provides the immutable `Dir` value type: a lexical handle on a filesystem
directory that can be compared, sorted, tested for containment and joined
with relative paths without consulting the filesystem or the process-wide
working directory.

All operations are pure functions of their inputs. `.` components are
dropped during normalization; `..` components are kept literally and never
resolved.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

POSIX_SEP = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."

# Separators accepted when splitting input text. '/' is always accepted;
# the platform native separators are added on top of it.
_INPUT_SEPARATORS: Tuple[str, ...] = tuple(
    sep for sep in (os.sep, os.altsep) if sep and sep != POSIX_SEP
)

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]", "Dir"]
Components = Tuple[str, ...]


# -----------------------------------------------------------------------------
# NORMALIZATION API
# -----------------------------------------------------------------------------

def split_components(path: PathLike) -> Components:
    """
    Convert any path-like value into its normalized component sequence.

    An absolute path is marked by a single leading empty component, so
    '/a/b' becomes ('', 'a', 'b') while 'a/b' becomes ('a', 'b').
    Repeated and trailing separators and '.' components are dropped;
    '..' is preserved as a literal component.

    Args:
        path: String, bytes, os.PathLike or Dir.

    Returns:
        Components: The normalized component tuple.
    """
    if isinstance(path, Dir):
        return path.components

    text = _to_text(path)
    for sep in _INPUT_SEPARATORS:
        text = text.replace(sep, POSIX_SEP)

    parts = tuple(p for p in text.split(POSIX_SEP) if p and p != CURRENT_DIR)
    if text.startswith(POSIX_SEP):
        return ("",) + parts
    return parts


def normalize_path(path: PathLike) -> str:
    """
    Return the canonical '/'-separated text of a path.

    Idempotent: normalize_path(normalize_path(p)) == normalize_path(p).
    """
    return _render(split_components(path), POSIX_SEP)


# -----------------------------------------------------------------------------
# VALUE TYPE
# -----------------------------------------------------------------------------

@dataclass(frozen=True, order=True, init=False, repr=False)
class Dir:
    """
    Immutable lexical handle on a filesystem directory.

    The directory does not need to exist. Equality, hashing and ordering
    are structural over the normalized component tuple, so two different
    spellings of the same real directory (e.g. through a symlink) are not
    equal.

    Attributes:
        components: Normalized components, with a leading '' when absolute.
        raw: Text given at construction, kept for as-given rendering.
    """
    components: Components
    raw: str = field(default="", compare=False)

    def __init__(self, path: PathLike = "") -> None:
        if isinstance(path, Dir):
            components, raw = path.components, path.raw
        else:
            raw = _to_text(path)
            components = split_components(raw)
        object.__setattr__(self, "components", components)
        object.__setattr__(self, "raw", raw)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_absolute(self) -> bool:
        return _is_absolute(self.components)

    @property
    def parts(self) -> Components:
        """Components without the absoluteness marker."""
        return self.components[1:] if self.is_absolute else self.components

    @property
    def name(self) -> str:
        parts = self.parts
        return parts[-1] if parts else ""

    @property
    def parent(self) -> Dir:
        """
        Lexical parent directory.

        Drops the last component. The root and the empty relative
        directory are their own parents. A trailing '..' is dropped like
        any other component, since nothing here is resolved.
        """
        if not self.parts:
            return self
        return Dir._from_components(self.components[:-1])

    # -------------------------------------------------------------------------
    # Containment
    # -------------------------------------------------------------------------

    def contains(self, candidate: PathLike) -> bool:
        """
        Check whether a path lies lexically inside this directory.

        The candidate is normalized like a constructed Dir and must equal
        this directory or have its components as a component-wise prefix.
        Absolute and relative values never contain each other. No path is
        checked for existence.

        Args:
            candidate: Path to test.

        Returns:
            bool: True if the candidate is this directory or below it.
        """
        other = split_components(candidate)
        if _is_absolute(other) != self.is_absolute:
            return False
        size = len(self.components)
        return other[:size] == self.components

    def __contains__(self, candidate: PathLike) -> bool:
        return self.contains(candidate)

    # -------------------------------------------------------------------------
    # Join / Compose
    # -------------------------------------------------------------------------

    def join_dir(self, relative: PathLike) -> Dir:
        """
        Join a path onto this directory and return the result as a Dir.

        Joining an absolute path discards this directory and yields the
        absolute path itself, the same convention as os.path.join. The
        operand's text is kept, so display(as_given=True) shows it as given.
        """
        other = split_components(relative)
        if _is_absolute(other):
            return Dir(relative)
        return Dir._from_components(self.components + other)

    def join(self, relative: PathLike) -> str:
        """
        Join a path onto this directory and return it as a native path string.

        Args:
            relative: Path to append. An absolute path is returned unchanged,
                replacing the base.

        Returns:
            str: Native-separator rendering of the joined path, or the
            absolute operand's own text.
        """
        return self.join_dir(relative).raw

    def __truediv__(self, relative: PathLike) -> Dir:
        if not isinstance(relative, (str, bytes, os.PathLike)):
            return NotImplemented
        return self.join_dir(relative)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def display(self, *, as_given: bool = False, sep: Optional[str] = None) -> str:
        """
        Render the directory as text.

        Args:
            as_given: Return the text supplied at construction instead of
                the normalized rendering.
            sep: Separator for the normalized rendering. Defaults to os.sep.

        Returns:
            str: Rendered path.
        """
        if as_given:
            return self.raw
        return _render(self.components, sep or os.sep)

    def as_posix(self) -> str:
        return _render(self.components, POSIX_SEP)

    def __str__(self) -> str:
        return _render(self.components, os.sep)

    def __fspath__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        text = self.as_posix()
        if not text.endswith(POSIX_SEP):
            text += POSIX_SEP
        return f"Dir({text!r})"

    # -------------------------------------------------------------------------
    # Internal constructors
    # -------------------------------------------------------------------------

    @classmethod
    def _from_components(cls, components: Components) -> Dir:
        result = cls.__new__(cls)
        object.__setattr__(result, "components", components)
        object.__setattr__(result, "raw", _render(components, os.sep))
        return result


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _to_text(path: PathLike) -> str:
    """Decode any str/bytes/os.PathLike into text (TypeError otherwise)."""
    if isinstance(path, Dir):
        return str(path)
    return os.fsdecode(path)


def _is_absolute(components: Components) -> bool:
    return bool(components) and components[0] == ""


def _render(components: Components, sep: str) -> str:
    if not components:
        return CURRENT_DIR
    if _is_absolute(components):
        return sep + sep.join(components[1:])
    return sep.join(components)
