"""Cache of valid Password Policy names.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from threading import Lock

from loguru import logger

from .exceptions import PasswordPolicyError
from .gateway import PasswordPolicyNamesGateway


class PasswordPolicyNameCache:
    """Process-wide set of names of Password Policies in effect.

    Holds an immutable snapshot which is replaced on every change, so
    readers never take the lock and never see a half-applied update.
    Writers are serialized by ``_lock``.

    Names are folded with ``str.lower``, the same rule the store uses for
    its unique key, so one cache entry always matches one stored policy.

    The set only follows changes made through ``add`` and ``remove``,
    policies created or deleted by other processes show up after the
    next ``reload``.
    """

    _names: frozenset[str]
    _lock: Lock
    _is_loaded: bool
    _generation: int
    _changes: list[tuple[bool, str]] | None

    def __init__(self, gateway: PasswordPolicyNamesGateway) -> None:
        """Load all policy names from the store once."""
        self._names = frozenset()
        self._lock = Lock()
        self._is_loaded = False
        self._generation = 0
        self._changes = None
        self.reload(gateway)

    @staticmethod
    def _fold(name: str) -> str:
        return name.lower()

    @property
    def is_loaded(self) -> bool:
        """Whether the last full load succeeded."""
        return self._is_loaded

    @property
    def names(self) -> frozenset[str]:
        """Current snapshot of folded names."""
        return self._names

    def reload(self, gateway: PasswordPolicyNamesGateway) -> bool:
        """Replace the whole set with the store listing.

        The listing runs without the lock. ``add`` and ``remove`` calls
        made meanwhile are recorded and replayed onto the new snapshot,
        so they are not lost by the swap. When a newer reload has started
        in between, its result wins and this one is dropped.

        A store failure leaves the cache empty (cold) instead of failing,
        the set is then filled by subsequent ``add`` calls.

        :param PasswordPolicyNamesGateway gateway: store
        :return bool: loaded or not
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._changes = []

        try:
            names = gateway.get_all_names()
        except PasswordPolicyError as err:
            logger.warning(
                f"Password Policy names cache load failed, cache is cold: "
                f"{err!r}",
            )
            self._swap(generation, frozenset(), is_loaded=False)
            return False

        snapshot = frozenset(map(self._fold, names))
        if self._swap(generation, snapshot, is_loaded=True):
            logger.info(
                f"Password Policy names cache loaded: {len(snapshot)}",
            )
        return True

    def _swap(
        self,
        generation: int,
        snapshot: frozenset[str],
        is_loaded: bool,
    ) -> bool:
        with self._lock:
            if generation != self._generation:
                return False

            names = set(snapshot)
            for is_added, name in self._changes or ():
                if is_added:
                    names.add(name)
                else:
                    names.discard(name)

            self._names = frozenset(names)
            self._is_loaded = is_loaded
            self._changes = None
            return True

    def is_valid(self, name: str) -> bool:
        """Check that policy is in effect, case-insensitive."""
        return self._fold(name) in self._names

    def add(self, name: str) -> None:
        """Add name, no-op if present."""
        folded = self._fold(name)
        with self._lock:
            if self._changes is not None:
                self._changes.append((True, folded))
            if folded not in self._names:
                self._names = self._names | {folded}

    def remove(self, name: str) -> None:
        """Remove name, no-op if absent."""
        folded = self._fold(name)
        with self._lock:
            if self._changes is not None:
                self._changes.append((False, folded))
            if folded in self._names:
                self._names = self._names - {folded}
