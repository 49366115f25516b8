# -*- coding: utf-8 -*-
from dataclasses import dataclass

import pytest

from trashman.selection import parse, select
from trashman.errors import (
    InvalidExpressionError, RangeError, OutOfRangeError, CancelledError
)


@dataclass
class FakeRecord:
    ordinal: int
    original_path: str
    alive: bool = True

    def exists(self):
        return self.alive


def make_records(*paths):
    return [FakeRecord(i, p) for i, p in enumerate(paths)]

FIVE = ["/tmp/r0", "/tmp/r1", "/tmp/r2", "/tmp/r3", "/tmp/r4"]


def ordinals(selected):
    return [r.ordinal for r in selected]

def never_called(message):
    raise AssertionError(f"unexpected prompt: {message}")


@pytest.mark.parametrize("expression,kind,expected", [
    (",1 2 3", "list", (1, 2, 3)),
    (",  4", "list", (4,)),
    ("-0 4", "range", (0, 4)),
    ("7", "single", (7,)),
    ("  2  ", "single", (2,)),
])
def test_parse_numeric_forms(expression, kind, expected):
    selection = parse(expression)
    assert selection.kind == kind
    assert selection.ordinals == expected

def test_parse_regex():
    selection = parse(r"/.*\.txt")
    assert selection.kind == "regex"
    assert selection.pattern.pattern == r".*\.txt"

@pytest.mark.parametrize("expression", ["", "   ", "x", "1 2", "*", ",", ",1 a", "3a", "²"])
def test_parse_rejects_invalid_expressions(expression):
    with pytest.raises(InvalidExpressionError):
        parse(expression)

@pytest.mark.parametrize("expression", ["-1", "-1 2 3", "-a 2", "-3 1", "-2 2"])
def test_parse_rejects_malformed_ranges(expression):
    with pytest.raises(RangeError):
        parse(expression)

def test_parse_rejects_broken_regex():
    with pytest.raises(InvalidExpressionError):
        parse("/(unclosed")

def test_range_is_inclusive():
    records = make_records(*FIVE)
    assert ordinals(select("-1 3", records, never_called, never_called)) == [1, 2, 3]

def test_range_end_must_be_inside_listing():
    records = make_records(*FIVE)
    with pytest.raises(RangeError):
        select("-2 5", records, never_called, never_called)

def test_range_aborts_when_record_vanished():
    records = make_records(*FIVE)
    records[2].alive = False
    selected = select("-1 3", records, never_called, never_called)
    assert next(selected).ordinal == 1
    with pytest.raises(OutOfRangeError):
        next(selected)

def test_single_out_of_range_fails_before_iteration():
    records = make_records(*FIVE)
    with pytest.raises(OutOfRangeError):
        select("5", records, never_called, never_called)

def test_single():
    records = make_records(*FIVE)
    assert ordinals(select("4", records, never_called, never_called)) == [4]

def test_list_skips_bad_ordinals_when_user_continues(scripted):
    records = make_records(*FIVE)
    confirm = scripted(True)
    warnings = []

    selected = ordinals(select(",0 7 2", records, confirm, warnings.append))

    assert selected == [0, 2]
    assert len(confirm.prompts) == 1
    assert warnings == ["Item 7 does not exist"]

def test_list_cancelled_by_user(scripted):
    records = make_records(*FIVE)
    selected = select(",0 7 2", records, scripted(False), lambda m: None)
    assert next(selected).ordinal == 0
    with pytest.raises(CancelledError):
        next(selected)

def test_list_rechecks_records_consumed_earlier(scripted):
    records = make_records(*FIVE)
    confirm = scripted(True)
    selected = []
    for record in select(",1 1", records, confirm, lambda m: None):
        record.alive = False
        selected.append(record.ordinal)
    assert selected == [1]
    assert len(confirm.prompts) == 1

def test_regex_matches_whole_path():
    records = make_records("/tmp/a.txt", "/tmp/b.log", "/tmp/c.txt.bak")
    assert ordinals(select(r"/.*\.txt", records, never_called, never_called)) == [0]

def test_regex_selects_every_match():
    records = make_records("/tmp/a.txt", "/tmp/b.log", "/home/c.txt")
    assert ordinals(select(r"/.*\.txt", records, never_called, never_called)) == [0, 2]

def test_regex_without_matches():
    records = make_records(*FIVE)
    assert ordinals(select("/nothing", records, never_called, never_called)) == []
