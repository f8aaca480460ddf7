"""
Patch engines.

The orchestrator only talks to the Patcher interface. WinePatcher is the
real one: it runs the downloaded WfcPatcher executable under wine and
treats it as a black box. Exit code 0 plus an output file on disk is
success; nothing else about the output is checked.

Usage (as module):
    from wfc_patcher import WinePatcher

    patched = WinePatcher(config).apply(config.working_copy_path)
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from patcher_errors import PatchError

log = logging.getLogger(__name__)


class Patcher(ABC):
    """Turns an input ROM into a patched ROM."""

    @abstractmethod
    def apply(self, input_path) -> Path:
        """Patch input_path and return where the result was written. Raises PatchError."""


def locate_patched_file(config):
    """
    Where the helper left its output: the work dir first, then base_dir.

    Returns None if it's in neither.
    """
    name = config.patched_file_name
    for candidate in (config.work_dir / name, config.base_dir / name):
        if candidate.exists():
            return candidate
    return None


class WinePatcher(Patcher):
    """Runs `<runtime> <helper> -d <domain> <input>` and finds the file it wrote."""

    def __init__(self, config):
        self.config = config

    def command(self, input_path):
        return [
            self.config.runtime,
            str(self.config.helper_path.resolve()),
            *self.config.helper_args,
            str(Path(input_path).resolve()),
        ]

    def apply(self, input_path) -> Path:
        cmd = self.command(input_path)
        log.debug("running %s", cmd)

        try:
            subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                cwd=self.config.base_dir,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            raise PatchError(f"Error running patcher: {e}") from e

        patched = locate_patched_file(self.config)
        if patched is None:
            raise PatchError("Patching failed: Patched file not found")
        return patched
