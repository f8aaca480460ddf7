"""
Configuration for the ReviveMii patcher.

Every fixed URL, file name and path used by the patcher lives here so the
other modules can be pointed at any directory (tests use a temp dir).

Usage (as module):
    from patcher_config import PatcherConfig

    config = PatcherConfig()                           # current directory
    config = PatcherConfig.for_directory('/some/dir')  # everything under /some/dir
"""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field


class PatcherConfig(BaseModel):
    """Fixed constants and derived paths for one patcher run."""

    base_dir: Path = Field(Path("."), description="Directory scanned for ROMs and holding all outputs")

    version: str = Field("v0.0.1", description="Version token expected in the remote version file")
    version_check_url: str = Field("https://theerrorexe.github.io/api-patcher-ver.txt")
    runtime_install_url: str = Field("https://wiki.winehq.org/Download")
    helper_download_url: str = Field(
        "https://github.com/AdmiralCurtiss/WfcPatcher/releases/download/v1.6/WfcPatcher1.6.zip"
    )

    runtime: str = Field("wine", description="Compatibility runtime the helper is started with")
    helper_dir_name: str = "patcher"
    helper_file_name: str = "helper.exe"
    archive_entry: str = Field("WfcPatcher.exe", description="Entry pulled out of the release zip")
    archive_file_name: str = "WfcPatcher1.6.zip"

    rom_suffix: str = ".nds"
    work_dir_name: str = "tmp"
    working_copy_name: str = "game.nds"
    domain: str = Field("d.errexe.xyz", description="Value passed with the helper's -d flag")
    output_name: str = "output.nds"

    @classmethod
    def for_directory(cls, base_dir: Union[str, Path], **overrides) -> "PatcherConfig":
        return cls(base_dir=Path(base_dir), **overrides)

    @property
    def helper_dir(self) -> Path:
        return self.base_dir / self.helper_dir_name

    @property
    def helper_path(self) -> Path:
        return self.helper_dir / self.helper_file_name

    @property
    def archive_path(self) -> Path:
        return self.base_dir / self.archive_file_name

    @property
    def work_dir(self) -> Path:
        return self.base_dir / self.work_dir_name

    @property
    def working_copy_path(self) -> Path:
        return self.work_dir / self.working_copy_name

    @property
    def output_path(self) -> Path:
        return self.base_dir / self.output_name

    @property
    def helper_args(self):
        """Flag arguments placed before the input path, e.g. ['-d', 'd.errexe.xyz']."""
        return ["-d", self.domain]

    @property
    def patched_file_name(self) -> str:
        # WfcPatcher names its output "<stem>(<domain>)<suffix>"
        copy = Path(self.working_copy_name)
        return f"{copy.stem}({self.domain}){copy.suffix}"
