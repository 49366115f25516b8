# -*- coding: utf-8 -*-
from .i18n import t


class TrashError(Exception):
    """Base for every error that aborts a trash operation."""
    pass


class LayoutError(TrashError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(t('layout_error', path=path, reason=reason))


class RelocationError(TrashError):
    def __init__(self, source, target, reason):
        self.source = source
        self.target = target
        super().__init__(t('relocation_error', source=source, target=target, reason=reason))


class InfoWriteError(TrashError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(t('info_write_error', path=path, reason=reason))


class InfoReadError(TrashError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(t('info_read_error', path=path, reason=reason))


class OverwriteRefusedError(TrashError):
    """The original location of a record is occupied again."""
    def __init__(self, path):
        self.path = path
        super().__init__(t('refusing_to_overwrite', path=path))


class DeletionError(TrashError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(t('deletion_error', path=path, reason=reason))


class EmptyTrashError(TrashError):
    def __init__(self, verb):
        self.verb = verb
        super().__init__(t('no_trash_to', verb=t(f'verb_{verb}')))


class SelectionError(TrashError):
    """Base for restore expressions that cannot be honoured."""
    pass


class InvalidExpressionError(SelectionError):
    def __init__(self, expression, reason=None):
        self.expression = expression
        if reason is None:
            message = t('invalid_expression', expression=expression)
        else:
            message = t('invalid_pattern', pattern=expression, reason=reason)
        super().__init__(message)


class RangeError(SelectionError):
    def __init__(self, expression, reason):
        self.expression = expression
        super().__init__(t('malformed_range', expression=expression, reason=reason))


class OutOfRangeError(SelectionError):
    def __init__(self, ordinal):
        self.ordinal = ordinal
        super().__init__(t('ordinal_out_of_range', ordinal=ordinal))


class CancelledError(TrashError):
    """The user declined a confirmation; the invocation must still fail."""
    def __init__(self):
        super().__init__(t('operation_cancelled'))
