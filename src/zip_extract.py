"""Pull exactly one named entry out of a zip archive."""

import shutil
import zipfile
from pathlib import Path

from patcher_errors import EntryNotFoundError


def extract_file_from_zip(archive_path, entry_name, output_path):
    """
    Extract the first entry named exactly entry_name to output_path.

    Args:
        archive_path: Path to the .zip file.
        entry_name:   Name of the entry inside the archive (exact match).
        output_path:  File to create; overwritten if it exists.

    Returns:
        The output path.

    Raises:
        EntryNotFoundError: no entry has that name. Nothing is written.
        zipfile.BadZipFile: the archive can't be read.
    """
    output_path = Path(output_path)

    with zipfile.ZipFile(archive_path, 'r') as archive:
        for info in archive.infolist():
            if info.filename != entry_name:
                continue

            with archive.open(info) as src, output_path.open('wb') as dst:
                shutil.copyfileobj(src, dst)
            return output_path

    raise EntryNotFoundError(entry_name)
