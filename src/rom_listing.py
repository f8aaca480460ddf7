"""Finding and copying the ROM files the user can choose from."""

import os
import shutil


def list_candidate_files(directory, suffix=".nds"):
    """
    Names in directory ending with suffix (case-sensitive, not recursive).

    Order is whatever os.listdir returns; nothing is sorted. An empty list
    means nothing matched. OSError from the listing propagates.
    """
    return [name for name in os.listdir(directory) if name.endswith(suffix)]


def copy_file(src, dest):
    """Byte copy of src into a newly created dest, overwriting it."""
    with open(src, 'rb') as source_file, open(dest, 'wb') as dest_file:
        shutil.copyfileobj(source_file, dest_file)
