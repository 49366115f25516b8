# -*- coding: utf-8 -*-
import os
import shutil
from dataclasses import dataclass, field

from .idgen import IdGenerator, staged_name
from .errors import (
    LayoutError, RelocationError, InfoWriteError, InfoReadError,
    OverwriteRefusedError, DeletionError
)

# Rutas arbitrarias de Linux no siempre son UTF-8 válido
INFO_ENCODING = 'utf-8'
INFO_ERRORS = 'surrogateescape'


@dataclass
class TrashRecord:
    """A trashed item as seen by one enumeration of the store."""
    ordinal: int
    id: str
    original_path: str
    info_path: str
    blob_path: str

    def exists(self):
        return os.path.exists(self.info_path) and os.path.lexists(self.blob_path)


@dataclass
class ConsistencyReport:
    orphans: list = field(default_factory=list)      # files/<id> without info/<id>
    dangling: list = field(default_factory=list)     # info/<id> without files/<id>
    recoverable: list = field(default_factory=list)  # staged info whose file was moved in
    stale: list = field(default_factory=list)        # staged info whose file never arrived

    @property
    def problems(self):
        return len(self.orphans) + len(self.dangling) + len(self.recoverable) + len(self.stale)


def _strerror(exc):
    return exc.strerror or str(exc)

def _visible(name):
    return not name.startswith('.')

def canonical_path(path):
    """
    Absolute resolved path of a source. Symlinks are trashed as links, so only
    their parent directory is resolved.
    """
    path = os.path.abspath(path)
    if os.path.islink(path):
        parent, name = os.path.split(path)
        return os.path.join(os.path.realpath(parent), name)
    return os.path.realpath(path)

def read_info(info_path):
    """Lee la ruta original guardada en un registro."""
    try:
        with open(info_path, 'r', encoding=INFO_ENCODING, errors=INFO_ERRORS) as f:
            return f.read()
    except OSError as e:
        raise InfoReadError(info_path, _strerror(e))

def _write_info(info_path, original_path):
    try:
        with open(info_path, 'w', encoding=INFO_ENCODING, errors=INFO_ERRORS) as f:
            f.write(original_path)
    except OSError as e:
        raise InfoWriteError(info_path, _strerror(e))

def _occupied(path):
    return os.path.lexists(path)

def _move_back(source, target):
    """
    Regular files are hard-linked into place and then unlinked, which fails if
    target appeared after the occupancy check. Directories and symlinks are
    renamed, so for them a concurrent writer can still lose that race.
    """
    if not os.path.isfile(source) or os.path.islink(source):
        os.rename(source, target)
        return
    try:
        os.link(source, target)
    except FileExistsError:
        raise OverwriteRefusedError(target)
    except OSError:
        # sin enlaces duros en este sistema de archivos
        os.rename(source, target)
        return
    os.unlink(source)

def _delete(path):
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        elif os.path.lexists(path):
            os.remove(path)
    except OSError as e:
        raise DeletionError(path, _strerror(e))


class TrashStore:
    """
    Records live in two parallel directories keyed by the same id:
    files/<id> holds the relocated item and info/<id> its original path.
    """
    def __init__(self, config, ids=None):
        self.config = config
        self.root = config.root
        self.files_dir = config.files_dir
        self.info_dir = config.info_dir
        self.ids = ids or IdGenerator(self.files_dir, self.info_dir)

    def ensure_layout(self):
        for directory in (self.files_dir, self.info_dir):
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise LayoutError(directory, _strerror(e))

    def _names(self, directory):
        with os.scandir(directory) as it:
            return [entry.name for entry in it if _visible(entry.name)]

    def is_empty(self):
        return not self._names(self.files_dir) or not self._names(self.info_dir)

    def contains(self, path):
        """True if path is the trash root or lives inside it."""
        root = os.path.realpath(self.root)
        path = canonical_path(path)
        return path == root or path.startswith(root + os.sep)

    def blob_path(self, record_id):
        return os.path.join(self.files_dir, record_id)

    def info_path(self, record_id):
        return os.path.join(self.info_dir, record_id)

    def enumerate(self):
        """
        Lists the records in insertion order (info file mtime, then id) and
        numbers them from 0. Ordinals are only meaningful for this listing.
        """
        entries = []
        with os.scandir(self.info_dir) as it:
            for entry in it:
                if not _visible(entry.name):
                    continue
                try:
                    mtime = entry.stat(follow_symlinks=False).st_mtime_ns
                except OSError as e:
                    raise InfoReadError(entry.path, _strerror(e))
                entries.append((mtime, entry.name))
        entries.sort()

        records = []
        for ordinal, (_, record_id) in enumerate(entries):
            info_path = self.info_path(record_id)
            records.append(TrashRecord(
                ordinal=ordinal,
                id=record_id,
                original_path=read_info(info_path),
                info_path=info_path,
                blob_path=self.blob_path(record_id),
            ))
        return records

    def add(self, source_path):
        """
        Moves source_path into the trash and returns the new id.

        The original path is staged first, then the item is renamed in, then
        the staged record is renamed into place. A record exists only once its
        info file does.
        """
        original_path = canonical_path(source_path)
        record_id = self.ids.generate()
        staged = os.path.join(self.info_dir, staged_name(record_id))
        blob = self.blob_path(record_id)

        _write_info(staged, original_path)
        try:
            os.rename(source_path.rstrip(os.sep) or source_path, blob)
        except OSError as e:
            os.remove(staged)
            raise RelocationError(source_path, blob, _strerror(e))
        try:
            os.rename(staged, self.info_path(record_id))
        except OSError as e:
            raise InfoWriteError(self.info_path(record_id), _strerror(e))
        return record_id

    def remove(self, record_id):
        """Borra permanentemente ambas mitades de un registro."""
        _delete(self.blob_path(record_id))
        _delete(self.info_path(record_id))

    def restore_one(self, info_path):
        """Puts a record back at its original path and returns that path."""
        record_id = os.path.basename(info_path)
        original_path = read_info(info_path)
        if _occupied(original_path):
            raise OverwriteRefusedError(original_path)

        blob = self.blob_path(record_id)
        try:
            os.makedirs(os.path.dirname(original_path), exist_ok=True)
            _move_back(blob, original_path)
        except OSError as e:
            raise RelocationError(blob, original_path, _strerror(e))
        _delete(info_path)
        return original_path

    def usage(self):
        """Returns (bytes, items) occupied by the relocated files."""
        total = count = 0
        for name in self._names(self.files_dir):
            path = self.blob_path(name)
            try:
                total += os.lstat(path).st_size
            except FileNotFoundError:
                continue
            count += 1
            if os.path.isdir(path) and not os.path.islink(path):
                for dirpath, dirnames, filenames in os.walk(path):
                    for child in dirnames + filenames:
                        try:
                            total += os.lstat(os.path.join(dirpath, child)).st_size
                        except FileNotFoundError:
                            continue
        return total, count

    def check(self):
        """Busca registros a medias sin modificar nada."""
        report = ConsistencyReport()
        blobs = set(self._names(self.files_dir))
        infos = set(self._names(self.info_dir))
        with os.scandir(self.info_dir) as it:
            staged = {
                entry.name[1:-len('.tmp')]: entry.path for entry in it
                if entry.name.startswith('.') and entry.name.endswith('.tmp')
            }

        for record_id in sorted(staged):
            if record_id in blobs and record_id not in infos:
                report.recoverable.append(staged[record_id])
            else:
                report.stale.append(staged[record_id])
        for record_id in sorted(blobs - infos - set(staged)):
            report.orphans.append(self.blob_path(record_id))
        for record_id in sorted(infos - blobs):
            report.dangling.append(self.info_path(record_id))
        return report

    def quarantine(self, report):
        """
        Repairs what check() found: orphaned files go to orphans/, unfinished
        records with their file present are committed, the rest is deleted.
        """
        if report.orphans:
            try:
                os.makedirs(self.config.orphans_dir, exist_ok=True)
            except OSError as e:
                raise LayoutError(self.config.orphans_dir, _strerror(e))
        for blob in report.orphans:
            target = os.path.join(self.config.orphans_dir, os.path.basename(blob))
            try:
                os.rename(blob, target)
            except OSError as e:
                raise RelocationError(blob, target, _strerror(e))
        for staged in report.recoverable:
            record_id = os.path.basename(staged)[1:-len('.tmp')]
            try:
                os.rename(staged, self.info_path(record_id))
            except OSError as e:
                raise InfoWriteError(self.info_path(record_id), _strerror(e))
        for path in report.dangling + report.stale:
            _delete(path)
