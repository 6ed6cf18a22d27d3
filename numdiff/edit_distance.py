from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generator,
    Generic,
    List,
    Sequence,
    TypeAlias,
    TypeVar,
    Union,
)

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Delete(Generic[T]):
    elem: T


@dataclass(frozen=True)
class Insert(Generic[T]):
    elem: T


@dataclass
class NoOp:
    """A run of consecutive steps that produce no visible change.

    ``length`` counts the steps; ``a_count`` and ``b_count`` count the
    elements each side consumed. Matches consume one element from both sides,
    a folded non-editable delete or insert consumes one element from a single
    side.
    """

    length: int
    a_count: int = -1
    b_count: int = -1

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"NoOp run length must be positive, got {self.length}")
        if self.a_count < 0:
            self.a_count = self.length
        if self.b_count < 0:
            self.b_count = self.length


Op: TypeAlias = Union[Delete[Any], Insert[Any], NoOp]
EditScript: TypeAlias = List[Op]


class Step(enum.Enum):
    DELETE = enum.auto()
    INSERT = enum.auto()
    DIAGONAL = enum.auto()


class ScriptBuilder(Generic[T]):
    def __init__(self) -> None:
        self.ops: EditScript = []

    def push(self, op: Delete[T] | Insert[T]) -> None:
        self.ops.append(op)

    def extend_nop(self, a_count: int, b_count: int) -> None:
        last = self.ops[-1] if self.ops else None
        if isinstance(last, NoOp):
            last.length += 1
            last.a_count += a_count
            last.b_count += b_count
        else:
            self.ops.append(NoOp(1, a_count, b_count))

    def build(self) -> EditScript:
        self.ops.reverse()
        return self.ops


class EditDistance(Generic[T]):
    def __init__(
        self,
        a: Sequence[T],
        b: Sequence[T],
        equal: Callable[[T, T], bool],
        editable: Callable[[T], bool],
    ):
        self.a = a
        self.b = b
        self.equal = equal
        self.editable = editable

    @classmethod
    def compute(
        cls,
        a: Sequence[T],
        b: Sequence[T],
        equal: Callable[[T, T], bool],
        editable: Callable[[T], bool],
    ) -> EditScript:
        return cls(a, b, equal, editable)._compute()

    def _compute(self) -> EditScript:
        builder: ScriptBuilder[T] = ScriptBuilder()

        for step, i, j in self._backtrack():
            match step:
                case Step.DIAGONAL:
                    builder.extend_nop(1, 1)
                case Step.DELETE if self.editable(self.a[i]):
                    builder.push(Delete(self.a[i]))
                case Step.DELETE:
                    builder.extend_nop(1, 0)
                case Step.INSERT if self.editable(self.b[j]):
                    builder.push(Insert(self.b[j]))
                case Step.INSERT:
                    builder.extend_nop(0, 1)

        return builder.build()

    def _backtrack(self) -> Generator[tuple[Step, int, int]]:
        steps = self._shortest_edit()
        i, j = len(self.a), len(self.b)

        while (i, j) != (0, 0):
            step = steps[i][j]

            if step == Step.DIAGONAL:
                i -= 1
                j -= 1
            elif step == Step.DELETE:
                i -= 1
            else:
                j -= 1

            yield step, i, j

    def _shortest_edit(self) -> list[list[Step]]:
        n, m = len(self.a), len(self.b)
        log.debug("filling %dx%d edit grid", n + 1, m + 1)

        cost = [[0] * (m + 1) for _ in range(n + 1)]
        steps = [[Step.DIAGONAL] * (m + 1) for _ in range(n + 1)]

        for j in range(1, m + 1):
            cost[0][j] = j
            steps[0][j] = Step.INSERT
        for i in range(1, n + 1):
            cost[i][0] = i
            steps[i][0] = Step.DELETE

        for i in range(1, n + 1):
            a = self.a[i - 1]
            for j in range(1, m + 1):
                diagonal = cost[i - 1][j - 1] if self.equal(a, self.b[j - 1]) else None
                steps[i][j], cost[i][j] = self._select(
                    cost[i - 1][j] + 1, cost[i][j - 1] + 1, diagonal
                )

        return steps

    @staticmethod
    def _select(delete: int, insert: int, diagonal: int | None) -> tuple[Step, int]:
        # ties resolve delete, then insert, then diagonal
        if delete <= insert and (diagonal is None or delete <= diagonal):
            return Step.DELETE, delete
        if diagonal is None or insert <= diagonal:
            return Step.INSERT, insert
        return Step.DIAGONAL, diagonal


def compute(
    a: Sequence[T],
    b: Sequence[T],
    equal: Callable[[T, T], bool],
    editable: Callable[[T], bool],
) -> EditScript:
    return EditDistance.compute(a, b, equal, editable)

