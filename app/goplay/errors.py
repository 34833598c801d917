"""Exception hierarchy for goplay.

Library code raises these; the CLI layer turns them into a single
descriptive line and an exit code.
"""


class GoplayError(Exception):
    """Base exception for all goplay errors."""


class SetupError(GoplayError):
    """Raised when the playground home directory cannot be prepared."""


class LedgerIOError(GoplayError):
    """Raised when the ledger file cannot be opened, read or written."""


class MarkerError(GoplayError):
    """Raised when a marker file cannot be checked or created."""


class NotOwnedError(GoplayError):
    """Raised when a directory lacks the goplay marker file."""


class NotFoundError(GoplayError):
    """Raised when a deletion target does not exist."""


class InvalidArgumentError(GoplayError):
    """Raised for non-positive counts and integer playground names."""


class CreationError(GoplayError):
    """Raised when a playground cannot be created or opened."""


class ConfigError(GoplayError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""
