from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Performs real filesystem operations on paths joined onto a `Dir`, so code
can work inside any number of roots at once without calling os.chdir.
Resolution of every path is the lexical join of the domain layer; this
module only adds the I/O. Errors are never swallowed: OSError propagates
to the caller exactly as the underlying os/shutil call raised it.
"""

import logging
import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator, List, Union

from workingdir.domain.constants import APP_NAME
from workingdir.domain.directory import Dir, PathLike

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "WorkingDir"
UNIX_APP_DIR_NAME = f".{APP_NAME}"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/WorkingDir
    - Linux/Mac: ~/.workingdir

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation; a read-only home is not fatal here
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Unable to create user data dir '{path}': {e}")

    return os.path.abspath(path)


def create_parents(path: PathLike) -> None:
    """
    Create every missing parent directory of a path.

    Does nothing if the path has no parent component.
    """
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)


# -----------------------------------------------------------------------------
# WORKING DIRECTORY API
# -----------------------------------------------------------------------------

class WorkingDir:
    """
    Filesystem operations scoped to a directory value.

    Each method joins its path argument(s) onto `root` and performs the
    corresponding os/shutil call on the result. Absolute arguments
    replace the root, following the join convention of `Dir`.

    Attributes:
        root: The directory every relative path is resolved against.
    """

    __slots__ = ("root",)

    def __init__(self, root: PathLike) -> None:
        self.root = Dir(root)

    def __fspath__(self) -> str:
        return os.fspath(self.root)

    def __repr__(self) -> str:
        return f"WorkingDir({self.root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkingDir):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)

    def join(self, path: PathLike) -> str:
        return self.root.join(path)

    # --- Files ---

    def open(self, path: PathLike, mode: str = "r", **kwargs: Any) -> IO[Any]:
        """Open a file relative to the root; kwargs go to the builtin open()."""
        with self._joined("open", path) as target:
            return open(target, mode, **kwargs)

    def open_readonly(self, path: PathLike) -> IO[bytes]:
        return self.open(path, "rb")

    def read(self, path: PathLike) -> bytes:
        """Read the entire contents of a file as bytes."""
        with self._joined("read", path) as target:
            with open(target, "rb") as f:
                return f.read()

    def read_to_string(self, path: PathLike, encoding: str = "utf-8") -> str:
        with self._joined("read_to_string", path) as target:
            with open(target, "r", encoding=encoding) as f:
                return f.read()

    def write(self, path: PathLike, contents: Union[str, bytes], encoding: str = "utf-8") -> None:
        """
        Write contents as the entire file, creating or truncating it.

        Parent directories are not created; use create_parents first.
        """
        with self._joined("write", path) as target:
            if isinstance(contents, str):
                with open(target, "w", encoding=encoding) as f:
                    f.write(contents)
            else:
                with open(target, "wb") as f:
                    f.write(contents)

    def copy(self, src: PathLike, dst: PathLike) -> int:
        """
        Copy a file's contents and permission bits, overwriting `dst`.

        Returns:
            int: Number of bytes copied (the size of the destination).
        """
        with self._joined("copy", src, dst) as (source, target):
            shutil.copy(source, target)
            return os.path.getsize(target)

    def remove_file(self, path: PathLike) -> None:
        with self._joined("remove_file", path) as target:
            os.remove(target)

    def hard_link(self, original: PathLike, link: PathLike) -> None:
        with self._joined("hard_link", original, link) as (source, target):
            os.link(source, target)

    # --- Queries ---

    def exists(self, path: PathLike) -> bool:
        """
        Return True if the path points at an existing entity.

        Follows symlinks. Any error (permission denied, broken link) is
        reported as False; use try_exists to see those errors.
        """
        return os.path.exists(self.join(path))

    def try_exists(self, path: PathLike) -> bool:
        """
        Return True if the path exists, False if it does not.

        Unlike exists(), only FileNotFoundError means False. Anything else
        is raised, including NotADirectoryError when a parent component is a
        regular file and PermissionError on an unreadable parent.
        """
        with self._joined("try_exists", path) as target:
            try:
                os.stat(target)
            except FileNotFoundError:
                return False
            return True

    def metadata(self, path: PathLike) -> os.stat_result:
        with self._joined("metadata", path) as target:
            return os.stat(target)

    def symlink_metadata(self, path: PathLike) -> os.stat_result:
        with self._joined("symlink_metadata", path) as target:
            return os.lstat(target)

    def read_link(self, path: PathLike) -> str:
        with self._joined("read_link", path) as target:
            return os.readlink(target)

    def canonicalize(self, path: PathLike) -> str:
        """
        Return the absolute path with symlinks and '..' resolved.

        This is the only place `..` is resolved, and it requires the path
        to exist.
        """
        with self._joined("canonicalize", path) as target:
            return str(Path(target).resolve(strict=True))

    # --- Directories ---

    def create_parents(self, path: PathLike) -> None:
        with self._joined("create_parents", path) as target:
            create_parents(target)

    def create_dir(self, path: PathLike) -> None:
        with self._joined("create_dir", path) as target:
            os.mkdir(target)

    def create_dir_all(self, path: PathLike) -> None:
        with self._joined("create_dir_all", path) as target:
            os.makedirs(target, exist_ok=True)

    def read_dir(self, path: PathLike = "") -> List[os.DirEntry]:
        """List directory entries; '.' and '..' are never included."""
        with self._joined("read_dir", path) as target:
            with os.scandir(target) as it:
                return list(it)

    def remove_dir(self, path: PathLike) -> None:
        """Remove an empty directory."""
        with self._joined("remove_dir", path) as target:
            os.rmdir(target)

    def remove_dir_all(self, path: PathLike) -> None:
        """Remove a directory and all of its contents. Symlinks are not followed."""
        with self._joined("remove_dir_all", path) as target:
            shutil.rmtree(target)

    # --- Moves ---

    def rename(self, src: PathLike, dst: PathLike) -> None:
        """Rename within this root, replacing `dst` if it exists."""
        with self._joined("rename", src, dst) as (source, target):
            os.replace(source, target)

    def move_to(self, new_root: PathLike, path: PathLike) -> None:
        """
        Move `<root>/<path>` to `<new_root>/<path>`, creating parents as needed.

        Fails if the source does not exist or the destination is on a
        different filesystem.
        """
        target = Dir(new_root).join(path)
        with self._joined("move_to", path) as source:
            create_parents(target)
            os.replace(source, target)
        logger.debug(f"Moved '{path}' from {self.root!r} to {Dir(new_root)!r}")

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    @contextmanager
    def _joined(self, op: str, *paths: PathLike) -> Iterator[Any]:
        """Yield the joined path(s) and trace any OSError before re-raising."""
        joined = [self.join(p) for p in paths]
        try:
            yield joined[0] if len(joined) == 1 else tuple(joined)
        except OSError as e:
            logger.debug(f"{op} failed in {self.root!r}: {e}")
            raise
