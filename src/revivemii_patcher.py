#!/usr/bin/env python3
"""
ReviveMii Patcher
=================
Patches a Nintendo DS ROM so its Wi-Fi features talk to a revival server
instead of the defunct Nintendo WFC.

The patching itself is done by WfcPatcher (downloaded on first run and run
under wine). This script only checks the environment, lets the user pick a
.nds file from the current directory and moves the result to output.nds.

Usage:
    python revivemii_patcher.py
"""

import logging
import os
import sys

from env_checks import check_version, is_runtime_installed
from helper_setup import ensure_helper_exists
from patcher_config import PatcherConfig
from patcher_errors import PatchError, PatcherError, SelectionError
from reporting import print_error, print_runtime_missing, print_success_banner
from rom_listing import copy_file, list_candidate_files
from selector import choose_file
from wfc_patcher import WinePatcher

log = logging.getLogger(__name__)


def patch_game(selected_file, config, patcher):
    """
    Copies selected_file into the work dir, runs patcher on the copy and
    moves its result to config.output_path (overwriting).

    Returns the output path. Every failure is a PatchError.
    """
    try:
        config.work_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PatchError(f"Error creating tmp directory: {e}") from e

    try:
        copy_file(config.base_dir / selected_file, config.working_copy_path)
    except OSError as e:
        raise PatchError(f"Error copying file: {e}") from e

    patched = patcher.apply(config.working_copy_path)

    try:
        os.replace(patched, config.output_path)
    except OSError as e:
        raise PatchError(f"Error moving patched file: {e}") from e

    return config.output_path


def run(config, input_source=input, patcher=None,
        runtime_check=is_runtime_installed, version_check=check_version):
    """
    One full patcher run. Returns the process exit code.

    Steps, in order, none retried:
    1. Runtime check
    2. Version check
    3. Helper setup
    4. ROM discovery ("Nothing to patch." ends the run with 0)
    5. Selection
    6. Patch
    7. Success banner
    """
    if patcher is None:
        patcher = WinePatcher(config)

    if not runtime_check(config.runtime):
        print_runtime_missing(config)
        return 1

    if not version_check(config):
        return 1

    try:
        ensure_helper_exists(config)
    except PatcherError as e:
        print(f"Error setting up patcher: {e}")
        return 1

    try:
        rom_files = list_candidate_files(config.base_dir, config.rom_suffix)
    except OSError as e:
        print(f"Error listing files: {e}")
        return 1

    if not rom_files:
        print("Nothing to patch.")
        return 0

    try:
        selected = choose_file(rom_files, input_source)
    except SelectionError as e:
        print(e)
        return 1

    try:
        patch_game(selected, config, patcher)
    except PatcherError as e:
        print_error(e)
        return 1

    print_success_banner(config)
    return 0


def main():
    level = getattr(logging, os.environ.get("REVIVEMII_LOG_LEVEL", "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level,
                        format="%(levelname)s %(name)s: %(message)s")

    config = PatcherConfig()
    log.debug("working in %s", config.base_dir.resolve())
    sys.exit(run(config))


if __name__ == '__main__':
    main()
