import shutil

from sync.installed import detect_installed_tools


def test_detect_installed_tools(monkeypatch) -> None:
    available = {"cursor-nightly", "aider"}
    monkeypatch.setattr(
        shutil, "which", lambda cmd: f"/usr/bin/{cmd}" if cmd in available else None
    )

    assert detect_installed_tools() == ["cursor", "aider"]


def test_detect_nothing_installed(monkeypatch) -> None:
    monkeypatch.setattr(shutil, "which", lambda cmd: None)

    assert detect_installed_tools() == []
