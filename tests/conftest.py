import os
import sys

import pytest

# Ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import gs_compressor


class FakePopen:
    """Stands in for subprocess.Popen and records every launch."""

    def __init__(self, returncode=0, launch_error=None, wait_error=None, on_run=None):
        self.returncode = returncode
        self.launch_error = launch_error
        self.wait_error = wait_error
        self.on_run = on_run
        self.calls = []
        self.waits = 0

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.launch_error is not None:
            raise self.launch_error
        if self.on_run is not None:
            self.on_run(args)
        return self

    def wait(self):
        self.waits += 1
        if self.wait_error is not None:
            raise self.wait_error
        return self.returncode


@pytest.fixture
def fake_popen(monkeypatch):
    def install(**kwargs):
        fake = FakePopen(**kwargs)
        monkeypatch.setattr(gs_compressor.subprocess, "Popen", fake)
        return fake
    return install
