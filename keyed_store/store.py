"""KeyedStore: almacén en memoria clave -> valor con orden de inserción.

Las entradas se guardan bajo claves codificadas (``MAP_DATA_PREFIX + clave``)
en un dict propio, separado del contador ``size``. Al iterar, las claves se
decodifican quedándose con el último segmento tras partir por el prefijo, así
que una clave que contenga el prefijo se reporta truncada en ``keys()`` y
``for_each()`` (aunque ``get``/``has``/``remove`` la encuentran bien).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from keyed_store.collection import for_each, for_each_own_key, is_array

_LOGGER = logging.getLogger(__name__)

# Todas las entradas de datos empiezan por este carácter
MAP_DATA_PREFIX = "å"


def encode_key(key: Any) -> str:
    """Clave interna para ``key`` (coercionada a str)."""
    return MAP_DATA_PREFIX + str(key)


def decode_key(encoded: str) -> str:
    """Último segmento de ``encoded`` partido por MAP_DATA_PREFIX."""
    return encoded.split(MAP_DATA_PREFIX)[-1]


class KeyedStore:
    """Almacén en memoria clave -> valor.

    Ejemplo::

        store = KeyedStore({"mydata": {"hello": "imfine"}, "what": "time"})
        store.set("when", "now")
        store.keys()  # ["mydata", "what", "when"]
    """

    def __init__(self, record: Mapping[str, Any] | None = None) -> None:
        self.size = 0
        self._entries: dict[str, Any] = {}
        if record is not None:
            self.set_from_record(record)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"

    def set(self, key: Any, value: Any) -> None:
        """Guarda ``value`` bajo ``key``; sobreescribe sin mover la posición."""
        if not self.has(key):
            self.size += 1
        self._entries[encode_key(key)] = value

    def set_from_record(self, record: Mapping[str, Any]) -> None:
        """Equivale a llamar a ``set`` por cada clave propia de ``record``."""
        for_each_own_key(record, lambda value, key: self.set(key, value))

    def merge(self, other: KeyedStore) -> None:
        """Copia las entradas de ``other`` (gana el valor de ``other``)."""
        other.for_each(lambda value, key: self.set(key, value))

    def get(self, key: Any) -> Any:
        return self._entries.get(encode_key(key))

    def has(self, key: Any) -> bool:
        return encode_key(key) in self._entries

    def _remove_key(self, key: Any) -> Any:
        encoded = encode_key(key)
        if encoded not in self._entries:
            return None
        self.size -= 1
        return self._entries.pop(encoded)

    def remove(self, key: Any) -> Any:
        """Elimina una clave y devuelve su valor, o None si no existía."""
        if is_array(key):
            raise TypeError("usa remove_many() para varias claves")
        return self._remove_key(key)

    def remove_many(self, keys: Iterable[Any]) -> list[Any]:
        """Elimina varias claves; siempre devuelve una lista, un resultado por clave."""
        if isinstance(keys, str) or not isinstance(keys, Iterable):
            keys = [keys]
        elif not is_array(keys):
            keys = list(keys)
        removed: list[Any] = []
        for_each(keys, lambda key, _index: removed.append(self._remove_key(key)))
        _LOGGER.debug("remove_many: %d claves pedidas, size=%d", len(removed), self.size)
        return removed

    def remove_all(self) -> None:
        """Vacía el almacén recorriendo una copia de las claves internas."""
        for encoded in list(self._entries):
            del self._entries[encoded]
            self.size -= 1
        _LOGGER.debug("remove_all: size=%d", self.size)

    def for_each(self, visitor: Callable[[Any, str], Any]) -> None:
        """Llama a ``visitor(value, key)`` en orden de inserción.

        Devolver False corta la iteración. El visitor puede eliminar la
        entrada actual o entradas aún no visitadas (estas se saltan); las
        entradas añadidas durante la iteración no se visitan.
        """
        for encoded in list(self._entries):
            if encoded not in self._entries:
                continue
            if visitor(self._entries[encoded], decode_key(encoded)) is False:
                break

    def _collect(self, pick: Callable[[Any, str], Any]) -> list[Any]:
        result: list[Any] = []
        self.for_each(lambda value, key: result.append(pick(value, key)))
        return result

    def keys(self) -> list[str]:
        return self._collect(lambda _value, key: key)

    def find(self, predicate: Callable[[Any, str], Any]) -> list[Any]:
        """Valores para los que ``predicate(value, key)`` es verdadero."""
        found: list[Any] = []

        def visit(value: Any, key: str) -> None:
            if predicate(value, key):
                found.append(value)

        self.for_each(visit)
        return found

    def to_array(self) -> list[Any]:
        return self._collect(lambda value, _key: value)
