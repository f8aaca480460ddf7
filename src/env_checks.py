"""Checks run before anything is downloaded: is wine installed, is this version still supported."""

import logging
import shutil

from patcher_errors import FetchError, ReadError
from remote_fetch import fetch_text

log = logging.getLogger(__name__)


def is_runtime_installed(runtime="wine"):
    """True when runtime can be found on PATH."""
    return shutil.which(runtime) is not None


def check_version(config):
    """
    Fetches the remote version file and checks it mentions config.version.

    Prints a distinct message for a connection failure, an unreadable
    response and a version mismatch. The HTTP status is not looked at.
    """
    try:
        body = fetch_text(config.version_check_url)
    except FetchError as e:
        log.debug("version check request failed: %s", e)
        print("Error: Could not check version. Make sure you have an internet connection.")
        return False
    except ReadError as e:
        log.debug("version check read failed: %s", e)
        print("Error: Could not read version check response.")
        return False

    if config.version in body:
        return True

    print("Error: Version not supported. Make sure you have the latest Version.")
    return False
