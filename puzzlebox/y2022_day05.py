"""Supply stacks: rearranging crates with two crane models."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Stacks = list[list[str]]


@dataclass(frozen=True)
class Move:
    """A crane instruction; ``source`` and ``target`` are zero-based stack indices."""

    count: int
    source: int
    target: int


def crate_cells(line: str) -> list[str]:
    """Split a diagram line into its three-character column cells."""
    line = line.rstrip("\r\n")
    cells = []
    for start in range(0, len(line), 4):
        cell = line[start:start + 3]
        if len(cell) < 3:
            raise ValueError(f"truncated crate diagram line: {line!r}")
        cells.append(cell)
    return cells


def parse_move(line: str) -> Move:
    """Parse ``"move N from S to D"`` into a :class:`Move`."""
    parts = line.strip().split(" ")
    if len(parts) < 6:
        raise ValueError(f"malformed move: {line!r}")
    try:
        count, source, target = int(parts[1]), int(parts[3]), int(parts[5])
    except ValueError as exc:
        raise ValueError(f"malformed move: {line!r}") from exc
    if count < 0 or source < 1 or target < 1:
        raise ValueError(f"malformed move: {line!r}")
    return Move(count, source - 1, target - 1)


def read_puzzle(lines: Iterable[str]) -> tuple[Stacks, list[Move]]:
    """Read the crate diagram and the moves.

    Each returned stack lists its crates from bottom to top.
    """
    stacks: Stacks = []
    remaining = iter(lines)
    for raw in remaining:
        cells = crate_cells(raw)
        if not cells:
            raise ValueError("crate diagram ended without a numbering line")
        if "1" in cells[0]:
            break
        while len(stacks) < len(cells):
            stacks.append([])
        for stack, cell in zip(stacks, cells):
            if " " not in cell:
                stack.append(cell.replace("[", "").replace("]", ""))
    else:
        raise ValueError("crate diagram has no numbering line")
    stacks = [list(reversed(stack)) for stack in stacks]
    moves = [parse_move(line) for line in remaining if "move" in line]
    return stacks, moves


def _check_move(stacks: Stacks, move: Move) -> None:
    for index in (move.source, move.target):
        if not 0 <= index < len(stacks):
            raise ValueError(f"no stack number {index + 1}")
    if move.count > len(stacks[move.source]):
        raise ValueError(
            f"cannot move {move.count} crates from stack {move.source + 1}"
        )


def move_single(stacks: Stacks, move: Move) -> None:
    """Move crates one at a time, reversing their order."""
    _check_move(stacks, move)
    source, target = stacks[move.source], stacks[move.target]
    for _ in range(move.count):
        target.append(source.pop())


def move_batch(stacks: Stacks, move: Move) -> None:
    """Move crates all at once, keeping their order."""
    _check_move(stacks, move)
    source = stacks[move.source]
    split = len(source) - move.count
    moved = source[split:]
    del source[split:]
    stacks[move.target].extend(moved)


def top_of_stacks(stacks: Stacks) -> str:
    """Return the top crate of every stack, concatenated."""
    if any(not stack for stack in stacks):
        raise ValueError("a stack is empty")
    return "".join(stack[-1] for stack in stacks).strip()


def solve(lines: Iterable[str], batch: bool = True) -> str:
    """Run all moves and return the top crates.

    ``batch`` selects the crane that moves several crates at once.
    """
    stacks, moves = read_puzzle(lines)
    mover = move_batch if batch else move_single
    for move in moves:
        mover(stacks, move)
    return top_of_stacks(stacks)