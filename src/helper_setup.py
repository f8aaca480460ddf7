"""
First-run setup of the WfcPatcher helper.

The helper is downloaded as a zip release, one executable is pulled out of
it, and the zip is deleted again. Once the executable is in place it is
never checked again; its presence is the only integrity check.
"""

import logging
import zipfile
from contextlib import contextmanager
from pathlib import Path

import requests

from patcher_errors import EntryNotFoundError, SetupError
from remote_fetch import download_file
from zip_extract import extract_file_from_zip

log = logging.getLogger(__name__)


@contextmanager
def downloaded_archive(url, archive_path):
    """
    Downloads url to archive_path and yields the path.

    The archive is removed on every exit path. A failed removal is logged,
    not raised.
    """
    archive_path = Path(archive_path)
    try:
        download_file(url, archive_path)
        yield archive_path
    finally:
        try:
            archive_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            log.warning("Could not remove %s: %s", archive_path, e)


def ensure_helper_exists(config):
    """
    Makes sure config.helper_path exists, downloading it if needed.

    Returns the helper path. Raises SetupError with context on any failure.
    """
    helper_path = config.helper_path
    if helper_path.exists():
        return helper_path

    print("Patcher not found. Downloading and setting it up...")

    try:
        config.helper_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SetupError(f"error creating patcher directory: {e}") from e

    try:
        with downloaded_archive(config.helper_download_url, config.archive_path) as archive:
            try:
                extract_file_from_zip(archive, config.archive_entry, helper_path)
            except (EntryNotFoundError, zipfile.BadZipFile, OSError) as e:
                raise SetupError(f"error extracting {config.archive_entry}: {e}") from e
    except (requests.exceptions.RequestException, OSError) as e:
        raise SetupError(f"error downloading patcher: {e}") from e

    print("Patcher successfully set up.")
    return helper_path
