"""Primitivas de colección y predicados de tipo usados por KeyedStore y NamespaceRegistry."""

from __future__ import annotations

import numbers
from collections.abc import Callable, Iterable, Mapping
from typing import Any

# Valores que no cuentan como "objeto" (equivalente a los primitivos de JS)
SCALAR_TYPES = (str, bytes, numbers.Number)

_MISSING = object()


def is_array(value: Any) -> bool:
    """True para listas y tuplas."""
    return isinstance(value, (list, tuple))


def is_function(value: Any) -> bool:
    """True para cualquier invocable (funciones, métodos, clases)."""
    return callable(value)


def is_object(value: Any) -> bool:
    """True para todo lo que no sea None ni un escalar.

    Las funciones, clases y contenedores también son objetos.
    """
    return value is not None and not isinstance(value, SCALAR_TYPES)


def reduce_sequence(
    seq: Iterable[Any],
    fn: Callable[[Any, Any], Any],
    initial: Any = _MISSING,
) -> Any:
    """Fold por la izquierda.

    Sin ``initial`` se usa el primer elemento como semilla; una secuencia
    vacía sin semilla lanza TypeError.
    """
    it = iter(seq)
    if initial is _MISSING:
        try:
            acc = next(it)
        except StopIteration:
            raise TypeError("reduce_sequence() de una secuencia vacía sin valor inicial") from None
    else:
        acc = initial
    for item in it:
        acc = fn(acc, item)
    return acc


def for_each(seq: Iterable[Any], fn: Callable[[Any, int], Any]) -> None:
    """Llama a ``fn(item, index)``; si devuelve False se corta la iteración."""
    for index, item in enumerate(seq):
        if fn(item, index) is False:
            break


def for_each_own_key(record: Mapping[str, Any], fn: Callable[[Any, str], Any]) -> None:
    """Recorre las claves propias de un mapping llamando a ``fn(value, key)``.

    El orden es el de inserción del mapping. Si ``fn`` devuelve False se
    corta la iteración.
    """
    if not isinstance(record, Mapping):
        raise TypeError(f"se esperaba un mapping, no {type(record).__name__}")
    for key, value in list(record.items()):
        if fn(value, key) is False:
            break
