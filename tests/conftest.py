# -*- coding: utf-8 -*-
import os
import itertools
import pytest

from trashman.config import TrashConfig
from trashman.store import TrashStore
from trashman.engine import TrashEngine
from trashman.i18n import set_language


class Scripted:
    """Confirm/ask collaborator that replays canned answers and records prompts."""
    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message):
        self.prompts.append(message)
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def english():
    set_language('en')
    yield
    set_language('en')

@pytest.fixture
def config(tmp_path):
    return TrashConfig(root=str(tmp_path / "trash"), line_editor=False, restore_help=False)

@pytest.fixture
def store(config):
    s = TrashStore(config)
    s.ensure_layout()
    return s

@pytest.fixture
def workdir(tmp_path):
    d = tmp_path / "work"
    d.mkdir()
    return d

@pytest.fixture
def populate(store, workdir):
    """Creates and trashes files, giving each record its own insertion time."""
    stamps = itertools.count(1_000_000_000, 10)

    def _populate(*names):
        paths = []
        for name in names:
            path = workdir / name
            path.write_text(f"content of {name}")
            record_id = store.add(str(path))
            stamp = next(stamps)
            os.utime(store.info_path(record_id), (stamp, stamp))
            paths.append(path)
        return paths
    return _populate

@pytest.fixture
def make_engine(store):
    def _make(confirm=None, ask=None):
        return TrashEngine(store, confirm or Scripted(), ask or Scripted())
    return _make

@pytest.fixture
def scripted():
    return Scripted
