from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """
    Keep a developer's $PPATH_SETTINGS from leaking into tests.
    """
    monkeypatch.delenv("PPATH_SETTINGS", raising=False)


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def make_tree():
    """
    Build a directory tree from a nested dict: str values are file
    contents, dict values are subdirectories.
    """
    def _make(root: Path, spec: dict) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for name, value in spec.items():
            if isinstance(value, dict):
                _make(root / name, value)
            else:
                write_file(root / name, value)
        return root

    return _make


def read_tree(root: Path) -> dict:
    out = {}
    for child in sorted(root.iterdir()):
        if child.is_dir():
            out[child.name] = read_tree(child)
        else:
            out[child.name] = child.read_text()
    return out
