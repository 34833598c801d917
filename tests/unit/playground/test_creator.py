"""Unit tests for PlaygroundCreator.

The setup collaborators are mocked; directory, marker and ledger effects
are checked on a real temporary home.
"""

import uuid
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from goplay.core.paths import MARKER_FILENAME
from goplay.errors import CreationError, InvalidArgumentError, LedgerIOError, MarkerError
from goplay.ledger.store import LedgerStore
from goplay.playground.creator import PlaygroundCreator, validate_name
from goplay.playground.setup import PlaygroundSetup


@pytest.fixture
def setup() -> MagicMock:
    """A PlaygroundSetup double that writes a real entry file."""
    mock = MagicMock(spec=PlaygroundSetup)

    def write_template(directory: Path, filename: str) -> Path:
        target = directory / filename
        target.write_text("package main\n")
        return target

    mock.write_template.side_effect = write_template
    return mock


@pytest.fixture
def creator(store: LedgerStore, home_dir: Path, setup: MagicMock) -> PlaygroundCreator:
    """A creator on the temporary home."""
    return PlaygroundCreator(store, home_dir, setup)


class TestValidateName:
    """Tests for validate_name."""

    @pytest.mark.parametrize("name", ["1", "42", "-3", "+7", "007"])
    def test_integer_names_rejected(self, name: str) -> None:
        """Integer names collide with delete counts."""
        with pytest.raises(InvalidArgumentError, match="cannot be an integer"):
            validate_name(name)

    @pytest.mark.parametrize("name", ["a/b", ".", ".."])
    def test_path_like_names_rejected(self, name: str) -> None:
        """Names must be plain directory names."""
        with pytest.raises(InvalidArgumentError, match="plain directory name"):
            validate_name(name)

    @pytest.mark.parametrize("name", ["scratch", "v2", "my-play_ground"])
    def test_plain_names_accepted(self, name: str) -> None:
        """Ordinary names pass."""
        validate_name(name)


class TestCreate:
    """Tests for PlaygroundCreator.create."""

    def test_named_playground(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path, setup: MagicMock
    ) -> None:
        """A named playground is created, stamped, recorded and opened."""
        directory = creator.create("scratch")

        assert directory == home_dir / "scratch"
        assert directory.is_dir()
        assert (directory / MARKER_FILENAME).is_file()
        assert store.read_all() == [str(directory)]
        setup.run_module_init.assert_called_once_with(directory)
        setup.write_template.assert_called_once_with(directory, "main.go")
        setup.open_editor.assert_called_once_with(directory, directory / "main.go")

    def test_generated_name_is_uuid(self, creator: PlaygroundCreator, store: LedgerStore) -> None:
        """An empty name generates a UUID directory."""
        directory = creator.create()

        uuid.UUID(directory.name)
        assert store.read_all() == [str(directory)]

    def test_creations_append_in_order(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path
    ) -> None:
        """Each creation is appended after the previous ones."""
        for name in ("a", "b", "c"):
            creator.create(name)

        assert store.read_all() == [str(home_dir / n) for n in ("a", "b", "c")]

    def test_integer_name_creates_nothing(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path
    ) -> None:
        """An integer name fails before anything is created."""
        with pytest.raises(InvalidArgumentError):
            creator.create("12")

        assert not (home_dir / "12").exists()
        assert store.read_all() == []

    def test_reuses_existing_directory(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path
    ) -> None:
        """An existing directory is reused by default."""
        (home_dir / "old").mkdir()

        directory = creator.create("old")

        assert (directory / MARKER_FILENAME).exists()
        assert store.read_all() == [str(directory)]

    def test_reuse_disabled(
        self, store: LedgerStore, home_dir: Path, setup: MagicMock
    ) -> None:
        """With reuse disabled an existing directory is an error and stays unmarked."""
        (home_dir / "old").mkdir()
        creator = PlaygroundCreator(store, home_dir, setup, reuse_existing=False)

        with pytest.raises(CreationError, match="already exists"):
            creator.create("old")

        assert not (home_dir / "old" / MARKER_FILENAME).exists()
        assert store.read_all() == []
        setup.run_module_init.assert_not_called()

    def test_existing_file_is_error(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path
    ) -> None:
        """A regular file in the way cannot become a playground."""
        (home_dir / "taken").write_text("file")

        with pytest.raises(CreationError, match="not a directory"):
            creator.create("taken")

        assert store.read_all() == []

    def test_custom_entry_file(
        self, store: LedgerStore, home_dir: Path, setup: MagicMock
    ) -> None:
        """The configured entry file name is used for template and editor."""
        creator = PlaygroundCreator(store, home_dir, setup, entry_file="app.go")

        directory = creator.create("custom")

        setup.write_template.assert_called_once_with(directory, "app.go")
        setup.open_editor.assert_called_once_with(directory, directory / "app.go")

    def test_editor_failure_still_records(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path, setup: MagicMock
    ) -> None:
        """A failing editor is raised, but the playground is stamped and recorded."""
        setup.open_editor.side_effect = CreationError("editor exited with 1")

        with pytest.raises(CreationError, match="editor"):
            creator.create("broken")

        directory = home_dir / "broken"
        assert (directory / MARKER_FILENAME).exists()
        assert store.read_all() == [str(directory)]

    def test_stamp_failure_skips_ledger(
        self, creator: PlaygroundCreator, store: LedgerStore
    ) -> None:
        """A directory that cannot be stamped is never recorded."""
        with patch(
            "goplay.playground.creator.marker.stamp", side_effect=MarkerError("read-only")
        ):
            creator.create("unstampable")

        assert store.read_all() == []

    def test_append_failure_is_not_fatal(
        self, creator: PlaygroundCreator, store: LedgerStore, home_dir: Path
    ) -> None:
        """Ledger append errors are logged and creation still succeeds."""
        with patch.object(store, "append", side_effect=LedgerIOError("disk full")):
            directory = creator.create("unrecorded")

        assert directory == home_dir / "unrecorded"
        assert (directory / MARKER_FILENAME).exists()
