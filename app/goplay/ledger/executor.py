"""Playground deletion and ledger reconciliation.

Each selected directory is checked for existence and for the goplay marker
before it is removed. Failures are recorded per directory and never stop
the rest of the batch. Afterwards the ledger is rewritten without exactly
the entries that were removed.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from goplay.errors import GoplayError, LedgerIOError, NotFoundError
from goplay.ledger import marker
from goplay.ledger.selector import DeletionRequest, select_candidates
from goplay.ledger.store import LedgerStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of a single playground deletion.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the directory was removed (or would be, in dry-run).
        error: Error message if the deletion failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


@dataclass(slots=True)
class DeletionReport:
    """Outcome of a deletion batch.

    Attributes:
        results: One result per candidate, in candidate order.
        remaining: Ledger entries kept after reconciliation.
        reconcile_error: Message if the ledger could not be rewritten.
    """

    results: list[DeletionResult] = field(default_factory=list)
    remaining: list[str] = field(default_factory=list)
    reconcile_error: str | None = None

    @property
    def deleted(self) -> list[str]:
        """Paths that were removed."""
        return [r.path for r in self.results if r.success and not r.dry_run]

    @property
    def failed(self) -> list[DeletionResult]:
        """Results for candidates that could not be removed."""
        return [r for r in self.results if not r.success]


class PlaygroundDeleter:
    """Deletes playgrounds and keeps the ledger in step.

    Attributes:
        _store: Open ledger for this run.
        _home_dir: Absolute playground home directory.
        _dry_run: If True, verify candidates without removing anything.
        _atomic: If True, reconcile the ledger via temp file and rename.
    """

    def __init__(
        self,
        store: LedgerStore,
        home_dir: Path,
        *,
        dry_run: bool = False,
        atomic: bool = False,
    ) -> None:
        self._store = store
        self._home_dir = home_dir
        self._dry_run = dry_run
        self._atomic = atomic

    def plan(self, request: DeletionRequest) -> list[str]:
        """Return the candidate paths for a request without deleting.

        Raises:
            InvalidArgumentError: If the request count is not positive.
            LedgerIOError: If the ledger cannot be read.
        """
        return select_candidates(request, self._store.read_all(), self._home_dir)

    def delete(self, request: DeletionRequest) -> DeletionReport:
        """Delete the playgrounds selected by a request.

        Args:
            request: Which playgrounds to delete.

        Returns:
            DeletionReport with per-path results and the reconciled ledger.

        Raises:
            InvalidArgumentError: If the request count is not positive.
            LedgerIOError: If the ledger cannot be read.
        """
        entries = self._store.read_all()
        candidates = select_candidates(request, entries, self._home_dir)

        report = DeletionReport()
        excluded: set[str] = set()
        for path in candidates:
            result = self._delete_single(path)
            report.results.append(result)
            if result.success and not result.dry_run:
                excluded.add(path)

        if self._dry_run:
            report.remaining = list(entries)
            return report

        report.remaining = [entry for entry in entries if entry not in excluded]
        try:
            self._store.rewrite(report.remaining, atomic=self._atomic)
        except LedgerIOError as e:
            logger.error("Ledger reconciliation failed: %s", e)
            report.reconcile_error = str(e)

        return report

    def _delete_single(self, path: str) -> DeletionResult:
        """Verify and remove a single playground directory.

        Args:
            path: Absolute playground path.

        Returns:
            DeletionResult indicating success or failure.
        """
        target = Path(path)
        try:
            if not target.exists():
                msg = f"could not delete dir {path}; dir does not exist"
                raise NotFoundError(msg)
            marker.verify(target)
        except GoplayError as e:
            logger.info("Refusing to delete %s: %s", path, e)
            return DeletionResult(path=path, success=False, error=str(e))

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeletionResult(path=path, success=True, dry_run=True)

        try:
            shutil.rmtree(target)
        except OSError as e:
            return DeletionResult(
                path=path,
                success=False,
                error=f"could not delete dir {path}; got error \"{e}\"",
            )

        logger.info("Deleted %s", path)
        return DeletionResult(path=path, success=True)
