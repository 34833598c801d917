"""Marker files proving goplay created a directory.

Every playground gets an empty ``.goplay_marker`` file. Deletion refuses to
remove any directory that does not carry one, whatever the ledger says.
"""

import logging
from pathlib import Path

from goplay.core.paths import MARKER_FILENAME
from goplay.errors import MarkerError, NotOwnedError

logger = logging.getLogger(__name__)


def marker_path(directory: Path) -> Path:
    """Return the marker file location inside a directory."""
    return directory / MARKER_FILENAME


def stamp(directory: Path) -> None:
    """Create the marker file inside a directory.

    An existing marker is left alone.

    Args:
        directory: Playground directory to stamp.

    Raises:
        MarkerError: If the marker cannot be created.
    """
    try:
        marker_path(directory).touch(exist_ok=True)
    except OSError as e:
        raise MarkerError(f"Cannot create marker in {directory}: {e}") from e
    logger.debug("Stamped %s", directory)


def verify(directory: Path) -> None:
    """Check that a directory carries the marker file.

    Args:
        directory: Directory about to be deleted.

    Raises:
        NotOwnedError: If the marker file is absent.
        MarkerError: If the marker cannot be checked for any other reason.
    """
    try:
        marker_path(directory).stat()
    except FileNotFoundError as e:
        msg = f"could not delete dir {directory}; dir does not have {MARKER_FILENAME} file"
        raise NotOwnedError(msg) from e
    except OSError as e:
        raise MarkerError(f"Cannot check marker in {directory}: {e}") from e


def is_stamped(directory: Path) -> bool:
    """Return True if the directory carries a marker file."""
    try:
        verify(directory)
    except (NotOwnedError, MarkerError):
        return False
    return True
