from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from numdiff.context_buffer import ContextBuffer
from numdiff.edit_distance import Delete, EditScript, Insert, NoOp

log = logging.getLogger(__name__)

CONTEXT_RADIUS = 3

SYMBOLS: dict[str, str] = {
    "context": "  ",
    "added": "+ ",
    "removed": "- ",
    "elided": "  ",
}


@dataclass(frozen=True)
class TaggedLine:
    tag: str
    text: str

    def __str__(self) -> str:
        return SYMBOLS[self.tag] + self.text


def elision(count: int) -> TaggedLine:
    noun = "line" if count == 1 else "lines"
    return TaggedLine("elided", f"... {count} {noun} ...")


class Renderer:
    class Desync(AssertionError):
        pass

    def __init__(
        self,
        a: Sequence[str],
        b: Sequence[str],
        context: int = CONTEXT_RADIUS,
        elide: bool = True,
    ):
        if context < 0:
            raise ValueError(f"context radius must not be negative, got {context}")
        self.a = a
        self.b = b
        self.a_pos = 0
        self.b_pos = 0
        self.elide = elide
        self.buffer = ContextBuffer(2 * context)

    @classmethod
    def render(
        cls,
        script: EditScript,
        a: Sequence[str],
        b: Sequence[str],
        context: int = CONTEXT_RADIUS,
        elide: bool = True,
    ) -> Iterator[TaggedLine]:
        return cls(a, b, context, elide)._render(script)

    def _render(self, script: EditScript) -> Iterator[TaggedLine]:
        for op in script:
            if isinstance(op, NoOp):
                self._buffer_run(op)
            elif isinstance(op, Insert):
                yield from self._flush()
                yield TaggedLine("added", self._take_b())
            elif isinstance(op, Delete):
                yield from self._flush()
                yield TaggedLine("removed", self._take_a())
            else:
                raise TypeError(f"unknown edit op: {op!r}")

        yield from self._flush()

        if self.a_pos != len(self.a) or self.b_pos != len(self.b):
            raise Renderer.Desync(
                f"edit script stopped at a[{self.a_pos}/{len(self.a)}], "
                f"b[{self.b_pos}/{len(self.b)}]"
            )

    def _buffer_run(self, op: NoOp) -> None:
        end = self.a_pos + op.a_count
        if end > len(self.a) or self.b_pos + op.b_count > len(self.b):
            raise Renderer.Desync(f"{op!r} runs past the end of the input")

        for line in self.a[self.a_pos : end]:
            self.buffer.push(line)

        self.a_pos = end
        self.b_pos += op.b_count

    def _flush(self) -> Iterator[TaggedLine]:
        dropped = self.buffer.dropped
        lines = self.buffer.flush()

        if dropped and self.elide:
            log.debug("eliding %d unchanged lines", dropped)
            yield elision(dropped)

        for line in lines:
            yield TaggedLine("context", line)

    def _take_a(self) -> str:
        if self.a_pos >= len(self.a):
            raise Renderer.Desync("delete past the end of the old input")
        line = self.a[self.a_pos]
        self.a_pos += 1
        return line

    def _take_b(self) -> str:
        if self.b_pos >= len(self.b):
            raise Renderer.Desync("insert past the end of the new input")
        line = self.b[self.b_pos]
        self.b_pos += 1
        return line


def render(
    script: EditScript,
    a: Sequence[str],
    b: Sequence[str],
    context: int = CONTEXT_RADIUS,
    elide: bool = True,
) -> Iterator[TaggedLine]:
    return Renderer.render(script, a, b, context, elide)
