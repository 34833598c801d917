"""Unit tests for console formatting helpers."""

from collections.abc import Iterator

import pytest
from goplay.utils import formatting
from goplay.utils.formatting import (
    create_playground_table,
    print_error,
    print_info,
    print_success,
    set_quiet,
)


@pytest.fixture
def quiet_reset() -> Iterator[None]:
    """Restore normal verbosity after the test."""
    yield
    set_quiet(False)


class TestPrinting:
    """Tests for the print helpers."""

    def test_info_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info messages go to stdout."""
        print_info("hello")
        assert "hello" in capsys.readouterr().out

    def test_quiet_suppresses_info_and_success(
        self, capsys: pytest.CaptureFixture[str], quiet_reset: None
    ) -> None:
        """Quiet mode hides info and success, but not errors."""
        set_quiet(True)

        print_info("info line")
        print_success("success line")
        print_error("error line")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error line" in captured.err

    def test_playground_table_columns(self) -> None:
        """The playground table has index, path and status columns."""
        table = create_playground_table("Playgrounds")
        assert [c.header for c in table.columns] == ["#", "Playground", "Status"]

    def test_shared_consoles(self) -> None:
        """stderr console writes to stderr."""
        assert formatting.err_console.stderr is True
