import io
import subprocess

import pytest
from rich.console import Console

from cmdlauncher.config.config import ConfigManager
from cmdlauncher.db.index_store import IndexStore
from cmdlauncher.db.scope_locator import ScopeLocator
from cmdlauncher.menu.tool_menu import ToolMenu


@pytest.fixture
def global_dir(tmp_path):
    """Cartella di 'installazione' che ospita lo scope globale."""
    path = tmp_path / "install"
    path.mkdir()
    return path


@pytest.fixture
def locator(global_dir):
    return ScopeLocator(global_dir)


@pytest.fixture
def store():
    return IndexStore()


@pytest.fixture
def project(tmp_path):
    """Albero /proj/sub/deep senza marker."""
    deep = tmp_path / "proj" / "sub" / "deep"
    deep.mkdir(parents=True)
    return tmp_path / "proj"


@pytest.fixture
def config(tmp_path, global_dir, monkeypatch):
    """ConfigManager nuovo, letto da un config.ini temporaneo."""
    monkeypatch.delenv("EDITOR", raising=False)
    ini = tmp_path / "config.ini"
    ini.write_text(
        "[PATHS]\n"
        f"global_directory = {global_dir}\n"
        f"logs_directory = {tmp_path / 'logs'}\n"
        "[EDITOR]\n"
        "command = fake-editor --wait\n",
        encoding="utf-8",
    )
    ConfigManager.reset()
    yield ConfigManager(ini)
    ConfigManager.reset()


@pytest.fixture
def launched(monkeypatch):
    """Sostituisce subprocess.run e registra i comandi lanciati."""
    calls = []

    class FakeRun:
        returncode = 0

        def __call__(self, cmd):
            calls.append(list(cmd))
            return subprocess.CompletedProcess(cmd, self.returncode)

    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    fake.calls = calls
    return fake


@pytest.fixture
def make_menu(locator, config):
    def _make(cwd):
        out = io.StringIO()
        err = io.StringIO()
        menu = ToolMenu(
            locator,
            config,
            cwd=cwd,
            console=Console(file=out, width=200),
            err_console=Console(file=err, width=200),
        )
        menu.out = out
        menu.err = err
        return menu
    return _make
