"""Tests for the polling file watcher."""

from buddybot.events import EventKind
from buddybot.watcher import FileWatcher


def test_first_poll_activates_file(sample_python_file, clean_source):
    watcher = FileWatcher(sample_python_file)
    event = watcher.poll()

    assert event.kind == EventKind.ACTIVATED
    assert event.identity == str(sample_python_file)
    assert event.text == clean_source
    assert event.is_python


def test_unchanged_file_yields_nothing(sample_python_file):
    watcher = FileWatcher(sample_python_file)
    watcher.poll()

    assert watcher.poll() is None


def test_modification_is_reported_as_save(sample_python_file):
    watcher = FileWatcher(sample_python_file)
    watcher.poll()
    sample_python_file.write_text("if x\n    pass\n")

    event = watcher.poll()
    assert event.kind == EventKind.SAVED
    assert event.text.startswith("if x")


def test_missing_file_yields_nothing(temp_dir):
    watcher = FileWatcher(temp_dir / "gone.py")

    assert watcher.poll() is None
