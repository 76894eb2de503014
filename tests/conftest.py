from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from steamlet.paths import DATA_DIR_ENV
from steamlet.services import game_launcher


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch) -> Path:
    """A steamlet data dir that does not exist yet."""
    path = tmp_path / "steamlet"
    monkeypatch.setenv(DATA_DIR_ENV, str(path))
    return path


class FakeProcesses:
    def __init__(self, flatpak_output: str = ""):
        self.flatpak_output = flatpak_output
        self.ran: list[list[str]] = []
        self.run_kwargs: list[dict] = []
        self.spawned: list[list[str]] = []

    def run(self, cmd, **kwargs):
        self.ran.append(list(cmd))
        self.run_kwargs.append(kwargs)
        return subprocess.CompletedProcess(cmd, 0, stdout=self.flatpak_output, stderr="")

    def popen(self, cmd, **kwargs):
        self.spawned.append(list(cmd))
        return object()


@pytest.fixture
def processes(monkeypatch) -> FakeProcesses:
    fake = FakeProcesses()
    monkeypatch.setattr(game_launcher.subprocess, "run", fake.run)
    monkeypatch.setattr(game_launcher.subprocess, "Popen", fake.popen)
    return fake
