"""
Blocking HTTP helpers used by the version check and the helper download.

No retries, no resume and no timeout beyond what requests uses by default.
"""

from pathlib import Path

import requests

from patcher_errors import FetchError, ReadError


def download_file(url, destination, show_progress=True):
    '''
    Streams url into a newly created file at destination, overwriting it,
    and displays a live MB counter.

    requests.exceptions.RequestException and OSError propagate unchanged.
    '''
    path = Path(destination)

    # Stream the download to keep memory usage low
    with requests.get(url, stream=True) as response:
        response.raise_for_status()

        total_dl = 0
        with path.open('wb') as file:
            for chunk in response.iter_content(chunk_size=8192):
                if chunk:
                    file.write(chunk)
                    total_dl += len(chunk)
                    if show_progress:
                        # \r keeps the output on a single line
                        print(f"\rProgress: {total_dl / (1024*1024):.2f} MB downloaded", end="")

    if show_progress:
        print()
    return path


def fetch_text(url):
    """
    Returns the body of url decoded as text.

    Raises FetchError when the request fails and ReadError when the body
    can't be read, so the caller can report the two separately.
    """
    try:
        response = requests.get(url, stream=True)
    except requests.exceptions.RequestException as e:
        raise FetchError(f"could not reach {url}: {e}") from e

    with response:
        try:
            return response.text
        except requests.exceptions.RequestException as e:
            raise ReadError(f"could not read response from {url}: {e}") from e
