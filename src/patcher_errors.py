"""Exceptions raised by the patcher. Every one of them ends the run with exit code 1."""


class PatcherError(Exception):
    """Base class for terminal patcher failures."""


class EnvironmentCheckError(PatcherError):
    """Wine is missing or the remote version check did not pass."""


class SetupError(PatcherError):
    """The helper executable could not be downloaded or extracted."""


class SelectionError(PatcherError):
    """The user's menu choice was not a valid entry."""


class PatchError(PatcherError):
    """Copying, running the helper or moving its output failed."""


class EntryNotFoundError(PatcherError):
    """A requested entry is not present in a zip archive."""

    def __init__(self, entry_name):
        super().__init__(f"file {entry_name} not found in zip archive")
        self.entry_name = entry_name


class FetchError(PatcherError):
    """The HTTP request itself failed (DNS, connection, TLS...)."""


class ReadError(PatcherError):
    """The HTTP response arrived but its body could not be read."""
