"""Ledger of created playground directories.

The ledger is a plain UTF-8 text file with one absolute directory path per
line, oldest first. Lines are only ever appended by creation, and only ever
removed by rewriting the whole file during deletion reconciliation.

A single handle is held open for the whole run; reads and writes go
through it, repositioned with seeks.
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from types import TracebackType
from typing import IO, Self

from goplay.core.paths import ensure_home_dir, get_ledger_path
from goplay.errors import LedgerIOError

logger = logging.getLogger(__name__)


class LedgerStore:
    """Append-only list of created playground paths.

    Storage location: <home_dir>/.generated_dirs

    Rewrites overwrite the file in place and truncate it; a crash in the
    middle of a rewrite can corrupt the ledger. Pass ``atomic=True`` to
    ``rewrite`` to go through a temporary file and rename instead.

    Attributes:
        path: Location of the ledger file.
    """

    def __init__(self, path: Path) -> None:
        """Open (creating if needed) the ledger file.

        Args:
            path: Location of the ledger file.

        Raises:
            LedgerIOError: If the file cannot be opened.
        """
        self._path = path
        self._file = self._open(path)

    @staticmethod
    def _open(path: Path) -> IO[str]:
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
            return os.fdopen(fd, "r+", encoding="utf-8", newline="\n")
        except OSError as e:
            raise LedgerIOError(f"Cannot open ledger {path}: {e}") from e

    @property
    def path(self) -> Path:
        """Location of the ledger file."""
        return self._path

    @property
    def closed(self) -> bool:
        """Whether the underlying handle has been closed."""
        return self._file.closed

    def append(self, entry: str) -> None:
        """Append a directory path as the newest entry.

        Args:
            entry: Absolute directory path (must not contain a newline).

        Raises:
            ValueError: If the entry is empty or contains a newline.
            LedgerIOError: If the write fails.
        """
        if not entry or "\n" in entry:
            msg = f"Invalid ledger entry: {entry!r}"
            raise ValueError(msg)

        try:
            self._file.seek(0, os.SEEK_END)
            self._file.write(entry + "\n")
            self._file.flush()
        except OSError as e:
            raise LedgerIOError(f"Cannot append to ledger {self._path}: {e}") from e
        logger.debug("Appended %s to ledger", entry)

    def read_all(self) -> list[str]:
        """Read every entry, oldest first.

        Lines are split on LF only, so other separator characters stay part
        of an entry. Whitespace is trimmed from each line and blank lines are
        skipped.

        Returns:
            Ordered list of directory paths.

        Raises:
            LedgerIOError: If the file cannot be read.
        """
        try:
            self._file.seek(0)
            content = self._file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerIOError(f"Cannot read ledger {self._path}: {e}") from e

        return [line.strip() for line in content.split("\n") if line.strip()]

    def rewrite(self, entries: list[str], *, atomic: bool = False) -> None:
        """Replace the ledger content with the given entries.

        Entries keep the order they are given in. The file ends with a
        newline only when it is non-empty.

        Args:
            entries: New ordered list of directory paths.
            atomic: Write a temporary file and rename it over the ledger.

        Raises:
            LedgerIOError: If any seek, write or truncate fails.
        """
        content = "\n".join(entries)
        if content:
            content += "\n"

        if atomic:
            self._rewrite_atomic(content)
            return

        try:
            self._file.seek(0)
            self._file.write(content)
            self._file.flush()
            self._file.truncate(len(content.encode("utf-8")))
        except OSError as e:
            raise LedgerIOError(f"Cannot rewrite ledger {self._path}: {e}") from e
        logger.debug("Rewrote ledger with %d entries", len(entries))

    def _rewrite_atomic(self, content: str) -> None:
        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="\n",
                dir=self._path.parent,
                prefix=".generated_dirs.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            self._file.close()
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise LedgerIOError(f"Cannot rewrite ledger {self._path}: {e}") from e
        finally:
            if self._file.closed:
                self._file = self._open(self._path)

    def close(self) -> None:
        """Close the ledger handle."""
        self._file.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def open_ledger(home_dir: Path) -> LedgerStore:
    """Prepare the playground home and open its ledger.

    Args:
        home_dir: Absolute playground home directory.

    Returns:
        Open LedgerStore; the caller is responsible for closing it.

    Raises:
        SetupError: If the home directory cannot be created.
        LedgerIOError: If the ledger cannot be opened.
    """
    ensure_home_dir(home_dir)
    return LedgerStore(get_ledger_path(home_dir))
