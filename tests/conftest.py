"""Shared fixtures for File Finder tests."""

from datetime import datetime
import os

import pytest


@pytest.fixture
def sample_home(tmp_path):
    """Build a small home directory.

    Layout::

        u/
            Docs/
            music/
            notes.TXT       (500 bytes, modified 2024-01-15 09:30)

    Returns:
        Resolved path of the ``u`` directory.
    """
    home = tmp_path / 'u'
    (home / 'Docs').mkdir(parents=True)
    (home / 'music').mkdir()
    notes = home / 'notes.TXT'
    notes.write_bytes(b'x' * 500)
    stamp = datetime(2024, 1, 15, 9, 30).timestamp()
    os.utime(notes, (stamp, stamp))
    return home.resolve()


@pytest.fixture
def recording_lister():
    """Lister stub that records every directory it is asked for.

    Returns:
        Callable with a ``calls`` list attribute.
    """
    calls = []

    def lister(directory):
        calls.append(directory)
        return []

    lister.calls = calls
    return lister


@pytest.fixture(scope='session')
def qapp():
    """Provide one offscreen QApplication for widget tests.

    Returns:
        The running QApplication instance.
    """
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
