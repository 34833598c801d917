"""Selection of ledger entries for deletion.

A deletion request names one playground, asks for the N most recent ones,
or asks for all of them. Selection only decides which paths to try; the
executor still checks each one before removing anything.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path

from goplay.errors import InvalidArgumentError

# Integer-looking tokens are counts, never names.
_INTEGER_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True, slots=True)
class ByName:
    """Delete the playground ``<home_dir>/<name>``."""

    name: str


@dataclass(frozen=True, slots=True)
class ByCount:
    """Delete the ``count`` most recently created playgrounds."""

    count: int


@dataclass(frozen=True, slots=True)
class DeleteAll:
    """Delete every playground recorded in the ledger."""


DeletionRequest = ByName | ByCount | DeleteAll


def is_integer_name(name: str) -> bool:
    """Return True if a name would be read as a deletion count."""
    return _INTEGER_RE.fullmatch(name) is not None


def parse_request(token: str | None = None, *, delete_all: bool = False) -> DeletionRequest:
    """Turn a CLI deletion argument into a request.

    Args:
        token: Playground name or count. None deletes the most recent one.
        delete_all: Select every ledger entry; ``token`` is ignored.

    Returns:
        The matching DeletionRequest variant.
    """
    if delete_all:
        return DeleteAll()
    if token is None:
        return ByCount(1)
    if is_integer_name(token):
        return ByCount(int(token))
    return ByName(token)


def resolve_named_target(name: str, home_dir: Path) -> str:
    """Join a playground name onto the home directory.

    The name is always treated as relative to the home directory, even
    when it starts with a slash, and the result is normalized so it
    compares equal to the ledger entry written at creation.

    Raises:
        InvalidArgumentError: If the name resolves to the home directory
            itself or to somewhere outside it.
    """
    home = os.path.normpath(str(home_dir))
    target = os.path.normpath(os.path.join(home, name.lstrip("/")))
    if target == home or os.path.commonpath([home, target]) != home:
        msg = f"could not delete dir {name}; it is not inside {home}"
        raise InvalidArgumentError(msg)
    return target


def select_candidates(
    request: DeletionRequest,
    entries: list[str],
    home_dir: Path,
) -> list[str]:
    """Compute the paths to attempt deletion on.

    Named requests are resolved against the home directory and are not
    looked up in the ledger. Count and all requests take the newest
    entries, keeping their ledger order.

    Args:
        request: What to delete.
        entries: Current ledger entries, oldest first.
        home_dir: Absolute playground home directory.

    Returns:
        Ordered candidate paths.

    Raises:
        InvalidArgumentError: If a count is zero or negative, or a name
            resolves outside the home directory.
    """
    if isinstance(request, ByName):
        return [resolve_named_target(request.name, home_dir)]

    if isinstance(request, ByCount):
        if request.count <= 0:
            msg = f"could not delete any dirs; provided number {request.count} was not positive"
            raise InvalidArgumentError(msg)
        effective = min(request.count, len(entries))
    else:
        effective = len(entries)

    if effective == 0:
        return []
    return list(entries[len(entries) - effective :])
