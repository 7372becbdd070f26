"""Async file-system primitives used by the workspace generator.

Blocking calls run in a worker thread via ``asyncio.to_thread`` so the event
loop stays responsive while the progress spinner animates.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import stat
import tempfile
from pathlib import Path

from sol_anchor_gen.errors import FileSystemError


class FileSystemWriter:
    """Creates directories, writes files atomically and removes trees."""

    async def ensure_directory(self, path: str | Path) -> None:
        """Create *path* and any missing parents; existing directories are fine."""
        try:
            await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemError("create directory", path, exc) from exc

    async def write_file(self, path: str | Path, content: str) -> None:
        """Write *content* to *path* as UTF-8, replacing any existing file.

        The content goes to a temporary file in the same directory which is
        then renamed over the target, so readers never see a partial file.
        """
        try:
            await asyncio.to_thread(_atomic_write, Path(path), content)
        except OSError as exc:
            raise FileSystemError("write file", path, exc) from exc

    async def path_exists(self, path: str | Path) -> bool:
        try:
            return await asyncio.to_thread(os.path.lexists, path)
        except (OSError, ValueError):
            return False

    async def remove_tree(self, path: str | Path) -> None:
        """Recursively delete *path*. Missing paths are ignored."""
        target = Path(path)
        try:
            await asyncio.to_thread(_remove, target)
        except OSError as exc:
            raise FileSystemError("remove directory", target, exc) from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _target_mode(path: Path) -> int:
    """Mode for *path*: kept from an existing file, else ``0o666`` minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _remove(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
