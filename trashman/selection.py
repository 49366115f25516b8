# -*- coding: utf-8 -*-
"""
Restore expressions.

The first character picks the form:

    ,0 4 7     list of ordinals, bad ones are reported and may be skipped
    -2 5       inclusive range, begin < end, end inside the listing
    3          single ordinal
    /regex     every record whose original path matches the whole regex

Records are re-checked right before they are handed out, since restoring an
earlier one in the same batch can consume a later one.
"""
import re
from dataclasses import dataclass

from .i18n import t
from .errors import (
    InvalidExpressionError, RangeError, OutOfRangeError, CancelledError
)

LIST_PREFIX = ','
RANGE_PREFIX = '-'
REGEX_PREFIX = '/'

_NUMBER = re.compile(r'[0-9]+')


@dataclass(frozen=True)
class Selection:
    kind: str
    ordinals: tuple = ()
    pattern: re.Pattern = None


def _is_number(token):
    return _NUMBER.fullmatch(token) is not None

def compile_pattern(pattern):
    """Compila un patrón del usuario o lanza InvalidExpressionError."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidExpressionError(pattern, reason=str(e))

def parse(expression):
    """Turns a restore expression into a Selection, without looking at the store."""
    expression = expression.strip()
    if not expression:
        raise InvalidExpressionError(expression)
    prefix, body = expression[0], expression[1:]

    if prefix == LIST_PREFIX:
        tokens = body.split()
        if not tokens or not all(_is_number(tok) for tok in tokens):
            raise InvalidExpressionError(expression)
        return Selection('list', tuple(int(tok) for tok in tokens))

    if prefix == RANGE_PREFIX:
        tokens = body.split()
        if len(tokens) != 2:
            raise RangeError(expression, t('range_needs_two'))
        if not all(_is_number(tok) for tok in tokens):
            raise RangeError(expression, t('range_not_numeric'))
        begin, end = int(tokens[0]), int(tokens[1])
        if begin >= end:
            raise RangeError(expression, t('range_order'))
        return Selection('range', (begin, end))

    if prefix == REGEX_PREFIX:
        return Selection('regex', pattern=compile_pattern(body))

    if _is_number(expression):
        return Selection('single', (int(expression),))

    raise InvalidExpressionError(expression)


def _is_live(ordinal, records):
    return 0 <= ordinal < len(records) and records[ordinal].exists()

def _iter_list(ordinals, records, confirm, warn):
    for ordinal in ordinals:
        if not _is_live(ordinal, records):
            warn(t('ordinal_out_of_range', ordinal=ordinal))
            if not confirm(t('continue_prompt')):
                raise CancelledError()
            continue
        yield records[ordinal]

def _iter_strict(ordinals, records):
    for ordinal in ordinals:
        if not _is_live(ordinal, records):
            raise OutOfRangeError(ordinal)
        yield records[ordinal]

def _iter_matches(pattern, records):
    for record in records:
        if pattern.fullmatch(record.original_path) and record.exists():
            yield record

def select(expression, records, confirm, warn):
    """
    Resolves expression against one enumeration of the store.

    Range and single selections are bounds-checked here, before anything is
    yielded, so a bad one never touches the store. The returned iterator is
    lazy and must be consumed while acting on each record.
    """
    selection = parse(expression)

    if selection.kind == 'list':
        return _iter_list(selection.ordinals, records, confirm, warn)

    if selection.kind == 'range':
        begin, end = selection.ordinals
        if end >= len(records):
            raise RangeError(expression.strip(), t('range_bounds', end=end, last=len(records) - 1))
        return _iter_strict(range(begin, end + 1), records)

    if selection.kind == 'single':
        ordinal = selection.ordinals[0]
        if not _is_live(ordinal, records):
            raise OutOfRangeError(ordinal)
        return _iter_strict(selection.ordinals, records)

    return _iter_matches(selection.pattern, records)
