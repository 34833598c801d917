"""External setup steps for a new playground.

Module init, the template entry file, and the editor launch. Module init
failures are logged and ignored: it fails harmlessly when a reused
directory already holds a module, and a missing toolchain should not
prevent the playground from being created.
"""

import logging
import os
import subprocess
from importlib import resources
from pathlib import Path

from goplay.errors import CreationError
from goplay.utils.shell import run_command, run_interactive

logger = logging.getLogger(__name__)

TEMPLATE_RESOURCE = "main.go.tmpl"


def load_template() -> str:
    """Read the bundled entry file template."""
    return resources.files("goplay.data").joinpath(TEMPLATE_RESOURCE).read_text(encoding="utf-8")


class PlaygroundSetup:
    """Runs the setup collaborators for a playground directory.

    Attributes:
        _init_command: Module-init argv; empty disables module init.
        _editor_command: Editor argv template; None disables the editor.
        _template: Content written to a new entry file.
    """

    def __init__(
        self,
        init_command: list[str],
        editor_command: list[str] | None,
        template: str | None = None,
    ) -> None:
        self._init_command = list(init_command)
        self._editor_command = list(editor_command) if editor_command else None
        self._template = template if template is not None else load_template()

    def run_module_init(self, directory: Path) -> None:
        """Run the module-init command inside the directory, ignoring failures."""
        if not self._init_command:
            return
        try:
            result = run_command(self._init_command, cwd=str(directory))
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Module init %s failed in %s: %s", self._init_command, directory, e)
            return
        if not result.success:
            logger.debug(
                "Module init exited %d in %s: %s",
                result.returncode,
                directory,
                result.stderr.strip(),
            )

    def write_template(self, directory: Path, filename: str) -> Path:
        """Write the entry file unless it already exists.

        Args:
            directory: Playground directory.
            filename: Entry file name.

        Returns:
            Path to the entry file.

        Raises:
            CreationError: If the file cannot be created or written.
        """
        target = directory / filename
        try:
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o644)
        except FileExistsError:
            logger.debug("Keeping existing %s", target)
            return target
        except OSError as e:
            raise CreationError(f"Cannot create {target}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self._template)
        except OSError as e:
            raise CreationError(f"Cannot write {target}: {e}") from e
        return target

    def open_editor(self, *targets: Path) -> None:
        """Open each target in the editor, one invocation per target.

        Raises:
            CreationError: If the editor cannot be started or exits non-zero.
        """
        if self._editor_command is None:
            return
        for target in targets:
            argv = [*self._editor_command, str(target)]
            try:
                returncode = run_interactive(argv)
            except OSError as e:
                raise CreationError(f"Cannot run editor {argv[0]}: {e}") from e
            if returncode != 0:
                raise CreationError(f"Editor command {' '.join(argv)} exited with {returncode}")
