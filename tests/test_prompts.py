# -*- coding: utf-8 -*-
import re

from prompt_toolkit.history import FileHistory, InMemoryHistory

from trashman import prompts
from trashman.config import TrashConfig


def test_line_editor_uses_prompt_toolkit(tmp_path, store, populate, monkeypatch):
    populate("a.txt")
    calls = []

    def fake_prompt(message, **kwargs):
        calls.append(kwargs)
        return "0"

    monkeypatch.setattr(prompts, "prompt", fake_prompt)
    config = TrashConfig(root=store.root, history_file=str(tmp_path / "cfg" / "history"))

    ask = prompts.make_asker(config, store)

    assert ask("Restore") == "0"
    [kwargs] = calls
    assert isinstance(kwargs["history"], FileHistory)
    words = kwargs["completer"].words
    [record] = store.enumerate()
    assert words == ["/" + re.escape(record.original_path)]

def test_history_falls_back_to_memory_without_file():
    assert isinstance(prompts._history(None), InMemoryHistory)

def test_plain_prompt_when_line_editor_disabled(config, monkeypatch):
    monkeypatch.setattr(prompts.click, "prompt", lambda message, **kwargs: "-1 2")
    ask = prompts.make_asker(config)
    assert ask("Restore") == "-1 2"
