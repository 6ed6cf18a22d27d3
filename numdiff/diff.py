from __future__ import annotations

import logging
from typing import Iterator, List, Union

from numdiff.edit_distance import EditScript, NoOp, compute
from numdiff.equality import LineEquality, line_editable
from numdiff.render import CONTEXT_RADIUS, TaggedLine, render

log = logging.getLogger(__name__)

Document = Union[str, List[str]]


def lines(document: Document) -> List[str]:
    if isinstance(document, str):
        return document.splitlines()
    return list(document)


def diff(a: Document, b: Document) -> EditScript:
    equal = LineEquality()
    script = compute(lines(a), lines(b), equal, line_editable)
    log.debug(
        "edit script has %d ops (%d cached line comparisons reused)",
        len(script),
        equal.hits,
    )
    return script


def has_changes(script: EditScript) -> bool:
    return not all(isinstance(op, NoOp) for op in script)


def diff_lines(
    a: Document,
    b: Document,
    context: int = CONTEXT_RADIUS,
    elide: bool = True,
) -> Iterator[TaggedLine]:
    a_lines, b_lines = lines(a), lines(b)
    return render(diff(a_lines, b_lines), a_lines, b_lines, context, elide)
