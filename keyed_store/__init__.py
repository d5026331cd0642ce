"""Utilidades: KeyedStore (mapa clave -> valor ordenado), registro de namespaces y primitivas de colección."""

__version__ = "0.1.0"

from keyed_store.collection import (
    for_each,
    for_each_own_key,
    is_array,
    is_function,
    is_object,
    reduce_sequence,
)
from keyed_store.namespace import NamespaceRegistry
from keyed_store.store import MAP_DATA_PREFIX, KeyedStore, decode_key, encode_key

__all__ = [
    "KeyedStore",
    "MAP_DATA_PREFIX",
    "NamespaceRegistry",
    "decode_key",
    "encode_key",
    "for_each",
    "for_each_own_key",
    "is_array",
    "is_function",
    "is_object",
    "reduce_sequence",
    "__version__",
]
