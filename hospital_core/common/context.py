# hospital_core/common/context.py
from __future__ import annotations

import functools
import itertools
import threading
import uuid
from dataclasses import dataclass, field
from uuid import UUID

from django.utils.module_loading import import_string

from hospital_core.common.conf import ledger_setting


class UUIDGenerator:
    """Random (version 4) identifiers."""

    def new_id(self) -> UUID:
        return uuid.uuid4()


class SequentialIdGenerator:
    """
    Monotonic identifiers, unique within one generator instance.
    Handy for deterministic fixtures.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> UUID:
        with self._lock:
            return UUID(int=next(self._counter))


@functools.lru_cache(maxsize=None)
def _shared_generator(path: str):
    return import_string(path)()


def default_id_generator():
    """
    One generator instance per configured dotted path, shared by every
    TxContext in the process.
    """
    return _shared_generator(ledger_setting("ID_GENERATOR"))


@dataclass(frozen=True)
class TxContext:
    """
    Per-call transaction context: who is calling, and where new ids come from.
    """
    sender: str
    ids: object = field(default_factory=default_id_generator)

    def fresh_id(self) -> UUID:
        return self.ids.new_id()
