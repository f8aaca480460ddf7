"""
Shared fixtures for the patcher tests.

Nothing here touches the network or needs wine: requests.get is replaced by
FakeResponse objects and the helper executable is a small Python script
started with sys.executable.
"""

import io
import sys
import textwrap
import zipfile

import pytest
import requests

from patcher_config import PatcherConfig


class FakeResponse:
    """Just enough of requests.Response for remote_fetch."""

    def __init__(self, body=b"", status_code=200, read_error=None):
        self.body = body
        self.status_code = status_code
        self.read_error = read_error
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]

    @property
    def text(self):
        if self.read_error is not None:
            raise self.read_error
        return self.body.decode("utf-8")


def build_zip(entries):
    """Zip bytes holding {name: bytes} entries, in insertion order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


HELPER_TEMPLATE = """\
import os
import sys

flag, domain, input_path = sys.argv[1:4]
if {exit_code}:
    sys.exit({exit_code})

stem, ext = os.path.splitext(os.path.basename(input_path))
name = stem + "(" + domain + ")" + ext
where = {where!r}
if where == "work":
    out = os.path.join(os.path.dirname(input_path), name)
elif where == "cwd":
    out = os.path.join(os.getcwd(), name)
else:
    out = None

if out is not None:
    with open(input_path, "rb") as src, open(out, "wb") as dst:
        dst.write(src.read()[::-1] + b"PATCHED")
"""


@pytest.fixture
def config(tmp_path):
    """Config rooted in a temp dir, running helpers with this interpreter."""
    return PatcherConfig.for_directory(tmp_path, runtime=sys.executable)


@pytest.fixture
def install_helper(config):
    """
    Writes a fake WfcPatcher at config.helper_path.

    where: "work" writes the output next to the input, "cwd" into the
    current directory, anything else writes nothing.
    """

    def _install(where="work", exit_code=0):
        config.helper_dir.mkdir(parents=True, exist_ok=True)
        config.helper_path.write_text(
            textwrap.dedent(HELPER_TEMPLATE.format(where=where, exit_code=exit_code))
        )
        return config.helper_path

    return _install


@pytest.fixture
def no_network(monkeypatch):
    """Fails the test if anything calls requests.get."""
    calls = []

    def _get(url, *args, **kwargs):
        calls.append(url)
        raise AssertionError(f"unexpected network access to {url}")

    monkeypatch.setattr(requests, "get", _get)
    return calls
