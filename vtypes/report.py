"""Text report for trying values against a type, rendered from Jinja2 templates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from .contract import Type
from .result import Failure

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class TrialRow:
    input_repr: str
    success: bool
    output_repr: str | None
    error: str | None


def trial_rows(t: Type, values: list[Any]) -> list[TrialRow]:
    rows: list[TrialRow] = []
    for value in values:
        result = t.try_(value)
        if isinstance(result, Failure):
            rows.append(TrialRow(repr(value), False, None, str(result.error)))
        else:
            rows.append(TrialRow(repr(value), True, repr(result.input), None))
    return rows


def render(template_name: str, **kwargs: Any) -> str:
    return _env.get_template(template_name).render(**kwargs)


def render_check_report(t: Type, rows: list[TrialRow]) -> str:
    return render("check_report.txt.j2", type_name=t.name, rows=rows)
