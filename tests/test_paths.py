import os
import sys
from pathlib import Path

import pytest

unix_only = pytest.mark.skipif(
    os.name == "nt" or sys.platform == "darwin", reason="XDG layout is used on Linux/BSD only"
)


@unix_only
def test_app_data_dir_follows_xdg_data_home(tmp_path: Path, monkeypatch):
    from picdiskslimmer.storage import get_app_data_dir

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert get_app_data_dir("Example") == tmp_path / "Example"


@unix_only
def test_app_data_dir_defaults_to_local_share(tmp_path: Path, monkeypatch):
    from picdiskslimmer.storage import get_app_data_dir

    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_app_data_dir() == tmp_path / ".local" / "share" / "PicDiskSlimmer"


@unix_only
def test_store_without_directory_uses_app_data_dir(tmp_path: Path, monkeypatch):
    from picdiskslimmer.storage import SettingsStore

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    store = SettingsStore()

    assert store.data_dir == tmp_path / "PicDiskSlimmer"
    assert store.path == tmp_path / "PicDiskSlimmer" / "settings.json"
    # Resolving the directory does not create it
    assert not store.data_dir.exists()
