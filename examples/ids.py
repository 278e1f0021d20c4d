"""Identifiers: either a short slug or a positive integer, or nothing.

    vtypes ast examples/ids.py
    vtypes check examples/ids.py '"ab-12"' 7 null 0
"""


def _slug():
    return strict(str).constrained(format=r"^[a-z0-9-]+$", max_size=32)


def _positive():
    return strict(int).constrained(gt=0)


def maybe_id_type():
    return (_slug() | _positive()).optional().with_meta(doc="record id")
