#!/usr/bin/env python3
"""
keyed_store_cli - CLI para cargar registros JSON en un KeyedStore y consultarlo.
Los registros se fusionan en el orden dado (gana el último).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from keyed_store import KeyedStore

_LOGGER = logging.getLogger("keyed_store_cli")

# Ancho máximo de la columna de valores en la salida de texto
VALUE_COLUMN_WIDTH = 44


class RecordError(Exception):
    """Un archivo de registro no se pudo cargar."""


@dataclass
class Entry:
    """Una entrada del store para el reporte."""
    key: str
    value: Any


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        description="Carga registros JSON en un KeyedStore y muestra su contenido."
    )
    parser.add_argument(
        "--record",
        type=Path,
        action="append",
        default=[],
        metavar="PATH",
        help="Archivo JSON con un objeto; repetible, se fusionan en orden",
    )
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="KEY",
        help="Clave a eliminar tras cargar (repetible)",
    )
    parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="KEY",
        help="En CI: fallar con exit 1 si la clave no está en el store final",
    )
    parser.add_argument(
        "--out",
        choices=("json", "text"),
        default="json",
        help="Formato de salida: json o text (default: json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log de depuración en stderr",
    )
    return parser.parse_args(argv)


def load_record(path: Path) -> KeyedStore:
    """Lee un objeto JSON y lo devuelve como KeyedStore."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise RecordError(f"el archivo no existe: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordError(f"no se pudo leer {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecordError(f"JSON inválido en {path}: {exc.msg} (línea {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise RecordError(f"{path} no contiene un objeto JSON")
    return KeyedStore(data)


def build_store(paths: list[Path]) -> KeyedStore:
    """Fusiona los registros en un único store."""
    store = KeyedStore()
    for path in paths:
        store.merge(load_record(path))
        _LOGGER.debug("registro %s fusionado, size=%d", path, store.size)
    return store


def build_report(store: KeyedStore, removed: dict[str, Any], missing: list[str]) -> dict:
    """Construye el reporte para salida JSON."""
    entries: list[Entry] = []
    store.for_each(lambda value, key: entries.append(Entry(key, value)))
    return {
        "size": store.size,
        "keys": store.keys(),
        "entries": [asdict(e) for e in entries],
        "removed": removed,
        "missing": missing,
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


def output_json(report: dict) -> None:
    """Imprime el reporte en JSON."""
    print(json.dumps(report, indent=2, ensure_ascii=False, default=str))


def output_text(report: dict) -> None:
    """Imprime el reporte como tabla en consola."""
    sep = "+" + "-" * 26 + "+" + "-" * (VALUE_COLUMN_WIDTH + 2) + "+"
    head = "| {:<24} | {:<{w}} |".format("Key", "Value", w=VALUE_COLUMN_WIDTH)
    print(f"keyed_store — {report['size']} entradas  ({report['timestamp']})")
    print(sep)
    print(head)
    print(sep)
    for e in report["entries"]:
        value = json.dumps(e["value"], ensure_ascii=False, default=str)[:VALUE_COLUMN_WIDTH]
        print("| {:<24} | {:<{w}} |".format(e["key"][:24], value, w=VALUE_COLUMN_WIDTH))
    print(sep)
    if report["removed"]:
        print("Eliminadas: " + ", ".join(report["removed"]))
    if report["missing"]:
        print("Faltan: " + ", ".join(report["missing"]))


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        store = build_store(args.record)
    except RecordError as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        return 1

    removed: dict[str, Any] = {}
    for key in args.remove:
        if store.has(key):
            removed[key] = store.remove(key)
        else:
            _LOGGER.debug("clave %s no presente, nada que eliminar", key)

    missing = [key for key in args.require if not store.has(key)]
    report = build_report(store, removed, missing)

    if args.out == "text":
        output_text(report)
    else:
        output_json(report)

    if missing:
        print(
            f"Faltan claves requeridas: {', '.join(missing)}.",
            file=sys.stderr,
        )
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
