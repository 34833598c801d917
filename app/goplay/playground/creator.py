"""Playground creation.

A playground is a directory under the goplay home with a module, an entry
file, and a marker. Whatever happens during setup, a directory that was
created gets stamped and recorded in the ledger so it can be deleted later.
"""

import logging
import uuid
from pathlib import Path

from goplay.errors import CreationError, InvalidArgumentError, LedgerIOError, MarkerError
from goplay.ledger import marker
from goplay.ledger.selector import is_integer_name
from goplay.ledger.store import LedgerStore
from goplay.playground.setup import PlaygroundSetup

logger = logging.getLogger(__name__)


def validate_name(name: str) -> None:
    """Reject names that cannot be used for a playground.

    Integer names collide with count-based deletion, and names with path
    separators would land outside the home directory.

    Raises:
        InvalidArgumentError: If the name is not allowed.
    """
    if is_integer_name(name):
        msg = f'could not create playground "{name}"; name cannot be an integer'
        raise InvalidArgumentError(msg)
    if "/" in name or name in (".", ".."):
        msg = f'could not create playground "{name}"; name must be a plain directory name'
        raise InvalidArgumentError(msg)


class PlaygroundCreator:
    """Creates playground directories and records them in the ledger.

    Attributes:
        _store: Open ledger for this run.
        _home_dir: Absolute playground home directory.
        _setup: Collaborators for module init, template and editor.
        _entry_file: Name of the template entry file.
        _reuse_existing: Whether an existing directory may be reused.
    """

    def __init__(
        self,
        store: LedgerStore,
        home_dir: Path,
        setup: PlaygroundSetup,
        *,
        entry_file: str = "main.go",
        reuse_existing: bool = True,
    ) -> None:
        self._store = store
        self._home_dir = home_dir
        self._setup = setup
        self._entry_file = entry_file
        self._reuse_existing = reuse_existing

    def create(self, name: str = "") -> Path:
        """Create a playground and open it in the editor.

        Args:
            name: Directory name. Empty generates a UUID.

        Returns:
            Path to the playground directory.

        Raises:
            InvalidArgumentError: If the name is an integer or not a plain name.
            CreationError: If the directory, template or editor step fails.
        """
        if name:
            validate_name(name)
        else:
            name = str(uuid.uuid4())

        directory = self._home_dir / name
        self._make_directory(directory)

        try:
            self._setup.run_module_init(directory)
            entry = self._setup.write_template(directory, self._entry_file)
            self._setup.open_editor(directory, entry)
        finally:
            self._register(directory)

        logger.info("Created playground %s", directory)
        return directory

    def _make_directory(self, directory: Path) -> None:
        try:
            directory.mkdir()
        except FileExistsError as e:
            if not directory.is_dir():
                raise CreationError(f"Cannot create {directory}: not a directory") from e
            if not self._reuse_existing:
                msg = f"Cannot create {directory}: directory already exists"
                raise CreationError(msg) from e
            logger.debug("Reusing existing directory %s", directory)
        except OSError as e:
            raise CreationError(f"Cannot create {directory}: {e}") from e

    def _register(self, directory: Path) -> None:
        """Stamp the directory, then record it in the ledger.

        The ledger never lists a directory without a marker, so a failed
        stamp skips the ledger append.
        """
        try:
            marker.stamp(directory)
        except MarkerError as e:
            logger.warning("Not recording %s in ledger: %s", directory, e)
            return

        try:
            self._store.append(str(directory))
        except LedgerIOError as e:
            logger.warning("Could not record %s in ledger: %s", directory, e)
