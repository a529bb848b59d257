import time
from pathlib import Path

from ps2suitcase.watcher import FileWatcher


def _wait_for_events(watcher, timeout=5.0):
    collected = []
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        collected.extend(watcher.poll_events())
        if collected:
            break
        time.sleep(0.05)
    return collected


def test_poll_without_path_is_empty():
    with FileWatcher() as watcher:
        assert watcher.poll_events() == []
        assert watcher.current_path is None


def test_change_path_sets_current_path(tmp_path):
    with FileWatcher() as watcher:
        watcher.change_path(tmp_path)
        assert watcher.current_path == Path(tmp_path)


def test_detects_new_file(tmp_path):
    with FileWatcher() as watcher:
        watcher.change_path(tmp_path)
        time.sleep(0.2)
        (tmp_path / "new.bin").write_bytes(b"data")
        events = _wait_for_events(watcher)
    assert any(
        Path(str(e.src_path)).name == "new.bin" for e in events
    )


def test_detects_changes_in_subfolder(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    with FileWatcher() as watcher:
        watcher.change_path(tmp_path)
        time.sleep(0.2)
        (sub / "inner.txt").write_text("x")
        events = _wait_for_events(watcher)
    assert any(
        Path(str(e.src_path)).name == "inner.txt" for e in events
    )


def test_switching_path_ignores_old_folder(tmp_path):
    old = tmp_path / "old"
    new = tmp_path / "new"
    old.mkdir()
    new.mkdir()
    with FileWatcher() as watcher:
        watcher.change_path(old)
        watcher.change_path(new)
        time.sleep(0.2)
        watcher.poll_events()
        (old / "ignored.txt").write_text("x")
        (new / "seen.txt").write_text("y")
        events = _wait_for_events(watcher)
        time.sleep(0.3)
        events.extend(watcher.poll_events())
    names = {Path(str(e.src_path)).name for e in events}
    assert "seen.txt" in names
    assert "ignored.txt" not in names


def test_stop_is_idempotent_and_disables_watching(tmp_path):
    watcher = FileWatcher()
    watcher.change_path(tmp_path)
    watcher.stop()
    watcher.stop()
    watcher.change_path(tmp_path)
    assert watcher.current_path is None