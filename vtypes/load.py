"""Loading type descriptors from user-written Python files.

A type file is plain Python run with everything from ``vtypes`` and
``vtypes.helpers`` already in scope. It exposes its type either through a
public ``<name>_type()`` factory or a module-level ``TYPE``; factories are
consulted first, in definition order.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from vtypes.contract import Type

_PRELUDE = "from vtypes import *\nfrom vtypes.helpers import *\n"
_FACTORY_NAME = re.compile(r"^[^_]\w*_type$")


def _execute(source: str, filename: str) -> dict[str, Any]:
    namespace: dict[str, Any] = {}
    exec(_PRELUDE, namespace)
    exec(compile(source, filename, "exec"), namespace)
    return namespace


def _factories(namespace: dict[str, Any]) -> list[tuple[str, Callable[[], Any]]]:
    return [
        (name, obj)
        for name, obj in namespace.items()
        if _FACTORY_NAME.match(name)
        and callable(obj)
        and not isinstance(obj, (type, Type))
    ]


def load_type_from_file(path: str) -> Type | str:
    """Return the descriptor defined in ``path``, or a message saying why not."""
    try:
        source = Path(path).read_text()
    except OSError as e:
        return f"cannot open {path}: {e.strerror}"

    try:
        namespace = _execute(source, path)
    except Exception as e:
        return f"{path} failed to run: {type(e).__name__}: {e}"

    problems: list[str] = []
    for name, factory in _factories(namespace):
        try:
            produced = factory()
        except Exception as e:
            problems.append(f"{name}() raised {type(e).__name__}: {e}")
            continue
        if isinstance(produced, Type):
            return produced
        problems.append(f"{name}() gave {type(produced).__name__}, not a Type")

    declared = namespace.get("TYPE")
    if isinstance(declared, Type):
        return declared
    if declared is not None:
        problems.append(f"TYPE is {type(declared).__name__}, not a Type")

    if problems:
        return "; ".join(problems)
    return f"{path} defines no *_type() factory and no TYPE"
