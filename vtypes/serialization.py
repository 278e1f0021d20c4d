"""JSON encoding for type ASTs.

An AST is a nest of tuples whose leaves are plain values, Python classes
(the primitives of nominal types) and metadata mappings. JSON has no tuples,
classes or non-string-keyed objects, so:

- tuples and lists encode as arrays and decode as tuples
- a class encodes as {"type": "class", "name": "<module>.<qualname>"}
- a mapping encodes as {"type": "map", "entries": {...}}

Round-trip: ast_from_json(ast_to_json(t.to_ast())) == t.to_ast() for any
type whose predicate arguments are tuples of JSON scalars.
"""

from __future__ import annotations

import importlib
import json
from collections.abc import Mapping
from types import NoneType
from typing import Any

from .contract import Type

_SPECIAL_CLASSES: dict[str, type] = {
    "builtins.NoneType": NoneType,
}


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------


def class_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_class(name: str) -> type:
    if name in _SPECIAL_CLASSES:
        return _SPECIAL_CLASSES[name]
    module_name, _, qualname = name.rpartition(".")
    # Nested classes: walk back until the prefix imports as a module
    parts = [qualname]
    while module_name:
        try:
            obj: Any = importlib.import_module(module_name)
            break
        except ImportError:
            module_name, _, outer = module_name.rpartition(".")
            parts.insert(0, outer)
    else:
        raise ValueError(f"Cannot resolve class: {name}")
    for part in parts:
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise ValueError(f"{name} is not a class")
    return obj


# ---------------------------------------------------------------------------
# AST nodes
# ---------------------------------------------------------------------------


def ast_to_json(node: Any) -> Any:
    if isinstance(node, (tuple, list)):
        return [ast_to_json(n) for n in node]
    elif isinstance(node, type):
        return {"type": "class", "name": class_name(node)}
    elif isinstance(node, Mapping):
        return {
            "type": "map",
            "entries": {str(k): ast_to_json(v) for k, v in node.items()},
        }
    elif node is None or isinstance(node, (str, int, float, bool)):
        return node
    raise TypeError(f"Cannot encode AST value of type {type(node).__name__}")


def ast_from_json(d: Any) -> Any:
    if isinstance(d, list):
        return tuple(ast_from_json(n) for n in d)
    elif isinstance(d, dict):
        t = d.get("type")
        if t == "class":
            return resolve_class(d["name"])
        elif t == "map":
            return {k: ast_from_json(v) for k, v in d["entries"].items()}
        raise ValueError(f"Unknown encoded object type: {t}")
    return d


# ---------------------------------------------------------------------------
# Convenience: dump / load as JSON strings
# ---------------------------------------------------------------------------


def dumps(obj: Type | tuple[Any, ...], meta: bool = True) -> str:
    ast = obj.to_ast(meta=meta) if isinstance(obj, Type) else obj
    return json.dumps(ast_to_json(ast), indent=2)


def loads(s: str) -> Any:
    return ast_from_json(json.loads(s))
