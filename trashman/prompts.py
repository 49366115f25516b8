# -*- coding: utf-8 -*-
import os
import re
import click

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.shortcuts import CompleteStyle

from .selection import REGEX_PREFIX
from .ui import I, R


def confirm(message):
    """Pregunta sí/no; por defecto no."""
    return click.confirm(f"{I}{message}{R}", default=False)

def _history(history_file):
    if not history_file:
        return InMemoryHistory()
    try:
        os.makedirs(os.path.dirname(history_file), exist_ok=True)
    except OSError:
        return InMemoryHistory()
    return FileHistory(history_file)

def path_completer(store):
    """Completes '/<original path>' so a single record can be picked by name."""
    words = [REGEX_PREFIX + re.escape(r.original_path) for r in store.enumerate()]
    return WordCompleter(words, sentence=True)

def make_asker(config, store=None):
    """
    Returns ask(message) -> str. With the line editor enabled it uses
    prompt_toolkit with history and path completion, otherwise a plain prompt.
    """
    if not config.line_editor:
        def ask_plain(message):
            return click.prompt(f"{I}» {message}{R}", default='', show_default=False)
        return ask_plain

    history = _history(config.history_file)

    def ask(message):
        return prompt(
            ANSI(f"{I}» {message}: {R}"),
            history=history,
            completer=path_completer(store) if store is not None else None,
            complete_style=CompleteStyle.MULTI_COLUMN,
        )
    return ask
