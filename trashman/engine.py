# -*- coding: utf-8 -*-
import os

from .i18n import t
from .ui import (
    AnimacionSpinner, bytes_a_legible, print_info, print_success,
    print_warning, print_record
)
from .errors import EmptyTrashError, CancelledError
from .selection import select, compile_pattern

MATCH_ALL = '.*'
RELATIVE_TOKENS = ('.', '..')


class TrashEngine:
    """
    Runs the add/list/dump/restore/size operations against a TrashStore.

    `confirm(message) -> bool` and `ask(message) -> str` are the interactive
    collaborators; tests pass scripted ones.
    """
    def __init__(self, store, confirm, ask, show_restore_help=True):
        self.store = store
        self.confirm = confirm
        self.ask = ask
        self.show_restore_help = show_restore_help

    def _require_records(self, verb):
        if self.store.is_empty():
            raise EmptyTrashError(verb)

    def _show(self, records):
        width = len(str(max(len(records) - 1, 0)))
        for record in records:
            print_record(record.ordinal, record.original_path, width=width)

    def add(self, paths):
        """Trashes every usable path; unusable ones are reported and skipped."""
        count = 0
        for path in paths:
            if os.path.basename(path.rstrip(os.sep)) in RELATIVE_TOKENS:
                print_warning(t('skipped_relative', path=path))
                continue
            if not os.path.lexists(path):
                print_warning(t('skipped_missing', path=path))
                continue
            if self.store.contains(path):
                print_warning(t('skipped_inside_trash', path=path))
                continue
            self.store.add(path)
            count += 1
            print_info(t('trashed_item', count=count, path=path))
        print_success(t('added_total', count=count))
        return count

    def list(self):
        self._require_records('list')
        records = self.store.enumerate()
        self._show(records)
        print_info(t('list_total', count=len(records)))
        return records

    def dump(self, force=False, pattern=None):
        """
        Permanently deletes every record whose original path fully matches
        pattern. One confirmation covers the whole batch.
        """
        self._require_records('dump')
        matcher = compile_pattern(MATCH_ALL if pattern is None else pattern)
        records = [r for r in self.store.enumerate() if matcher.fullmatch(r.original_path)]
        if not records:
            print_info(t('dumped_total', count=0))
            return 0

        if not force:
            self._show(records)
            if not self.confirm(t('dump_confirm', count=len(records))):
                raise CancelledError()

        for record in records:
            self.store.remove(record.id)
            print_info(t('dumped_item', path=record.original_path))
        print_success(t('dumped_total', count=len(records)))
        return len(records)

    def restore(self):
        """Asks for a selection expression and restores what it selects."""
        self._require_records('restore')
        records = self.store.enumerate()
        self._show(records)
        if self.show_restore_help:
            print_info(t('restore_help'))

        expression = self.ask(t('restore_prompt'))
        restored = []
        for record in select(expression, records, self.confirm, print_warning):
            path = self.store.restore_one(record.info_path)
            print_success(t('restored_item', ordinal=record.ordinal, path=path))
            restored.append(record.ordinal)

        if restored:
            print_success(t('restored_total', ordinals=' '.join(str(o) for o in restored)))
        else:
            print_info(t('nothing_restored'))
        return restored

    def size(self):
        self._require_records('size')
        with AnimacionSpinner(t('computing_size')):
            total, count = self.store.usage()
        print_info(t('size_report', size=bytes_a_legible(total), count=count))
        return total, count

    def check(self, fix=False):
        report = self.store.check()
        for path in report.orphans:
            print_warning(t('check_orphan', path=path))
        for path in report.dangling:
            print_warning(t('check_dangling', path=path))
        for path in report.recoverable + report.stale:
            print_warning(t('check_staged', path=path))

        if not report.problems:
            print_success(t('check_clean'))
        elif fix:
            self.store.quarantine(report)
            print_success(t(
                'check_fixed',
                orphans=len(report.orphans),
                recovered=len(report.recoverable),
                records=len(report.dangling) + len(report.stale),
            ))
        else:
            print_info(t('check_issues', count=report.problems))
        return report
