"""Memoizing key-to-value caches.

`KeyedLazy` computes a value once per distinct key and hands back the stored
value on every later lookup. It is the building block for the per-input
name caches used while generating binding classes.

The cache is plain process-local state and is not synchronized. Share an
instance across threads only behind an external lock.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar, overload

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

logger = logging.getLogger(__name__)


class KeyedLazy(Generic[K, T]):
    """Compute `initializer(key)` at most once per key.

    Entries are never evicted. A value of `None` is cached like any other.
    If the initializer raises, the exception propagates and nothing is stored.

    Args:
        initializer: Function mapping a key to its value.
    """

    __slots__ = ("_initializer", "_mapping")

    def __init__(self, initializer: Callable[[K], T]) -> None:
        self._initializer = initializer
        self._mapping: Dict[K, T] = {}

    def get(self, key: K) -> T:
        """Return the value for `key`, computing and storing it on first use."""
        try:
            return self._mapping[key]
        except KeyError:
            pass
        logger.debug("Cache miss for %r", key)
        result = self._initializer(key)
        self._mapping[key] = result
        return result

    def __contains__(self, key: object) -> bool:
        return key in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        name = getattr(self._initializer, "__qualname__", repr(self._initializer))
        return f"KeyedLazy({name}, size={len(self._mapping)})"


def lazy(initializer: Callable[[K], T]) -> KeyedLazy[K, T]:
    """Return a new, empty `KeyedLazy` backed by `initializer`."""
    return KeyedLazy(initializer)


class keyed_property(Generic[T]):
    """Read-only attribute computed once per owning instance.

    Every instance acts as a key into one `KeyedLazy` shared by the
    descriptor, so instances must be hashable and stay referenced by the
    cache for its lifetime.

    Example:
        class Layout:
            def __init__(self, name):
                self.name = name

            @keyed_property
            def class_name(self):
                return to_camel_case(self.name)
    """

    def __init__(self, initializer: Callable[[Any], T]) -> None:
        self._cache: KeyedLazy[Any, T] = KeyedLazy(initializer)
        self.__doc__ = getattr(initializer, "__doc__", None)
        self._name: Optional[str] = getattr(initializer, "__name__", None)

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @overload
    def __get__(self, instance: None, owner: Optional[type] = None) -> "keyed_property[T]": ...

    @overload
    def __get__(self, instance: object, owner: Optional[type] = None) -> T: ...

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return self._cache.get(instance)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"can't set attribute {self._name!r}")


__all__ = ["KeyedLazy", "keyed_property", "lazy"]
