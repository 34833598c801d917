"""Ledger of created playgrounds and safe deletion.

This module provides the append-only ledger file, the marker guard that
proves goplay owns a directory, deletion selection, and the executor that
removes playgrounds and reconciles the ledger.
"""

from goplay.ledger.executor import DeletionReport, DeletionResult, PlaygroundDeleter
from goplay.ledger.marker import is_stamped, stamp, verify
from goplay.ledger.selector import (
    ByCount,
    ByName,
    DeleteAll,
    DeletionRequest,
    parse_request,
    resolve_named_target,
    select_candidates,
)
from goplay.ledger.store import LedgerStore, open_ledger

__all__ = [
    "ByCount",
    "ByName",
    "DeleteAll",
    "DeletionReport",
    "DeletionRequest",
    "DeletionResult",
    "LedgerStore",
    "PlaygroundDeleter",
    "is_stamped",
    "open_ledger",
    "parse_request",
    "resolve_named_target",
    "select_candidates",
    "stamp",
    "verify",
]
