"""
The reader's library: an ordered, duplicate-free list of text files.

Paths are stored as absolute strings in insertion order and persisted
as a JSON array in library.json next to the config file.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from natsort import natsorted

from polyglot_reader.config import config_dir

logger = logging.getLogger(__name__)

LIBRARY_FILE_NAME = "library.json"
HIDDEN_PREFIX = "."

TEXT_EXTENSIONS = frozenset(
    {
        "txt", "text", "md", "log", "csv", "json", "xml", "html",
        "py", "js", "c", "h", "cpp", "java", "rb", "go", "rs",
        "swift", "kt", "sh", "bat", "ini", "cfg", "yaml", "yml", "toml",
    }
)  # fmt: skip


def library_path() -> Path:
    return config_dir() / LIBRARY_FILE_NAME


def is_text_file(path: str | Path) -> bool:
    """Whether the file extension marks `path` as readable text."""
    return Path(path).suffix.lower().lstrip(".") in TEXT_EXTENSIONS


def scan_directory(folder: str | Path) -> list[Path]:
    """
    List the text files directly inside `folder`.

    Not recursive. Subdirectories and hidden entries are skipped and
    the result is in natural sort order ("ch2.txt" before "ch10.txt").
    An unreadable folder yields an empty list.
    """
    folder = Path(folder)
    try:
        children = list(folder.iterdir())
    except OSError as e:
        logger.warning("Could not scan %s: %s", folder, e)
        return []

    files = [
        child
        for child in children
        if not child.name.startswith(HIDDEN_PREFIX) and child.is_file() and is_text_file(child)
    ]
    return natsorted(files, key=lambda p: p.name)


class Library:
    """
    Ordered collection of document paths.

    Mutating methods return how many entries they added or removed so
    callers know whether to persist and refresh.

    Example:
        >>> library = Library.load()
        >>> library.add_folder("~/books")
        12
        >>> library.save()
    """

    def __init__(self, paths: Iterable[str | Path] = ()):
        self._paths: list[str] = []
        for path in paths:
            self._append(path)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __getitem__(self, index: int) -> str:
        return self._paths[index]

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return self._normalize(path) in self._paths

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Library):
            return NotImplemented
        return self._paths == other._paths

    def __repr__(self) -> str:
        return f"Library({self._paths!r})"

    @staticmethod
    def _normalize(path: str | Path) -> str:
        return str(Path(path).expanduser().absolute())

    def _append(self, path: str | Path) -> bool:
        normalized = self._normalize(path)
        if normalized in self._paths:
            return False
        self._paths.append(normalized)
        return True

    @property
    def paths(self) -> list[str]:
        """A copy of the stored paths, in order."""
        return list(self._paths)

    def names(self) -> list[str]:
        """File names for display, in library order."""
        return [Path(p).name for p in self._paths]

    def copy(self) -> Library:
        # Stored paths are already normalized and unique
        clone = Library()
        clone._paths = list(self._paths)
        return clone

    def add(self, path: str | Path) -> int:
        """Add a single path if it is not already present. Returns 1 or 0."""
        return int(self._append(path))

    def add_folder(self, folder: str | Path) -> int:
        """Add every text file directly inside `folder`."""
        added = sum(self._append(path) for path in scan_directory(Path(folder).expanduser()))
        logger.debug("Added %d files from %s", added, folder)
        return added

    def add_path(self, path: str | Path) -> int:
        """
        Add a dropped path: a folder's text files, or a single text file.

        Missing paths and non-text files are ignored.
        """
        path = Path(path).expanduser()
        if path.is_dir():
            return self.add_folder(path)
        if path.is_file() and is_text_file(path):
            return self.add(path)
        logger.debug("Ignoring %s: not a text file or folder", path)
        return 0

    def remove(self, indices: Iterable[int]) -> int:
        """Remove the entries at `indices`; out-of-range indices are ignored."""
        doomed = {i for i in indices if 0 <= i < len(self._paths)}
        self._paths = [p for i, p in enumerate(self._paths) if i not in doomed]
        return len(doomed)

    def clear(self) -> int:
        removed = len(self._paths)
        self._paths = []
        return removed

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path | None = None) -> Library:
        """
        Load library.json, returning an empty library on any failure.

        Entries that are not strings are dropped.
        """
        path = Path(path) if path is not None else library_path()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug("No library at %s", path)
            return cls()
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable library %s: %s", path, e)
            return cls()

        if not isinstance(data, list):
            logger.warning("Ignoring library %s: expected a JSON array", path)
            return cls()
        return cls(entry for entry in data if isinstance(entry, str))

    def save(self, path: str | Path | None = None) -> bool:
        """Write library.json. Returns False (and logs) if the write fails."""
        path = Path(path) if path is not None else library_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._paths, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save library %s: %s", path, e)
            return False
        return True
