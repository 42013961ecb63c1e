"""
Local mirror writer helpers.

A mirror is a local subtree whose directories and file names correspond
one to one to a remote subtree.
"""

import logging
from pathlib import Path

from ..exceptions import LocalIOError
from ..utils.formatting import relative_to


def ensure_local_directory(path: Path) -> Path:
    """
    Make sure a local directory exists.

    Calling it again for the same path is a no-op.

    Raises:
        LocalIOError: If the directory cannot be created (e.g. a file is in the way)
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LocalIOError(f"Cannot create directory {path}: {e}", path=str(path)) from e
    logging.debug("Ensured local directory %s", path)
    return path


def mirror_path(local_root: Path, start_dir: str, remote_path: str) -> Path:
    """
    Map a remote path under ``start_dir`` to its place under ``local_root``.

    Example:
        >>> mirror_path(Path("/tmp/out"), "/org/", "/org/example/a.jar")
        PosixPath('/tmp/out/example/a.jar')

    Raises:
        LocalIOError: If the remote path would escape the local root
    """
    parts = [part for part in relative_to(remote_path, start_dir).split("/") if part]
    if any(part in (".", "..") for part in parts):
        raise LocalIOError(f"Refusing to map {remote_path} outside of {local_root}", path=remote_path)
    return Path(local_root).joinpath(*parts)


__all__ = ["ensure_local_directory", "mirror_path"]
