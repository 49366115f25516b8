# -*- coding: utf-8 -*-
import os
import random
from cryptography.hazmat.primitives import hashes

ID_SUFFIX = ".trash"
ENTROPY_BYTES = 32

def staged_name(record_id):
    """Nombre temporal del registro mientras se confirma la entrada."""
    return f".{record_id}.tmp"

def random_digest(entropy=os.urandom):
    """SHA-256 hex digest of fresh random bytes."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(entropy(ENTROPY_BYTES))
    return digest.finalize().hex()


class IdGenerator:
    """
    Produces trash identifiers that are free in both store directories.

    An id is a process-local random number, a digest of random bytes and a
    fixed suffix. Candidates are re-sampled until neither a file, a record nor
    a staged record uses them.
    """
    def __init__(self, files_dir, info_dir, rng=None, entropy=os.urandom):
        self.files_dir = files_dir
        self.info_dir = info_dir
        self.rng = rng or random.Random()
        self.entropy = entropy

    def _sample(self):
        return f"{self.rng.randint(0, 32767)}{random_digest(self.entropy)}{ID_SUFFIX}"

    def is_taken(self, record_id):
        return (
            os.path.lexists(os.path.join(self.files_dir, record_id))
            or os.path.lexists(os.path.join(self.info_dir, record_id))
            or os.path.lexists(os.path.join(self.info_dir, staged_name(record_id)))
        )

    def generate(self):
        candidate = self._sample()
        while self.is_taken(candidate):
            candidate = self._sample()
        return candidate
