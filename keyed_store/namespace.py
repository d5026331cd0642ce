"""Registro de namespaces: árbol de nombres con rutas separadas por puntos."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from keyed_store.collection import is_function, is_object, reduce_sequence

_LOGGER = logging.getLogger(__name__)


def is_valid_module(value: Any) -> bool:
    """Un módulo válido es un objeto o un invocable."""
    return is_object(value) or is_function(value)


def split_path(path: str) -> list[str]:
    """Parte ``"a.b.c"`` en segmentos; rechaza rutas vacías o con segmentos vacíos."""
    if not isinstance(path, str) or not path:
        raise ValueError("la ruta del namespace no puede estar vacía")
    parts = path.split(".")
    if any(not part for part in parts):
        raise ValueError(f"ruta de namespace inválida: {path!r}")
    return parts


def _child(node: Any, name: str) -> Any:
    if not is_object(node):
        return None
    if isinstance(node, MutableMapping):
        return node.get(name)
    return getattr(node, name, None)


def _bind(node: Any, name: str, value: Any) -> None:
    if isinstance(node, MutableMapping):
        node[name] = value
    else:
        setattr(node, name, value)


class NamespaceRegistry:
    """Registro explícito de namespaces (sin raíz global implícita).

    Ejemplo::

        registry = NamespaceRegistry()
        components = registry.get_or_create("ne.component")
        components["list_menu"] = ListMenu
        registry.get("ne.component.list_menu")  # ListMenu
    """

    def __init__(self, root: MutableMapping[str, Any] | None = None) -> None:
        self.root: MutableMapping[str, Any] = root if root is not None else {}

    def get(self, path: str) -> Any:
        """Nodo en ``path`` o None si falta algún segmento."""
        return reduce_sequence(split_path(path), _child, self.root)

    def define(self, path: str, props: Any = None, override: bool = False) -> Any:
        """Define (o devuelve) el módulo en ``path``.

        Si ya existe un módulo válido y no se pide ``override`` se devuelve
        tal cual. Si no, se crean los nodos intermedios que falten y el último
        segmento se enlaza a ``props`` (o a un dict vacío si ``props`` no es
        un módulo válido).
        """
        parts = split_path(path)
        existing = self.get(path)
        if not override and is_valid_module(existing):
            return existing

        *parents, last = parts

        def descend(node: Any, name: str) -> Any:
            child = _child(node, name)
            if not is_valid_module(child):
                child = {}
                _bind(node, name, child)
            return child

        parent = reduce_sequence(parents, descend, self.root)
        module = props if is_valid_module(props) else {}
        if existing is not None:
            _LOGGER.debug("namespace %s redefinido", path)
        else:
            _LOGGER.debug("namespace %s creado", path)
        _bind(parent, last, module)
        return module

    def get_or_create(self, path: str) -> Any:
        return self.define(path)
