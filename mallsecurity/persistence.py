"""Plain-text storage of users, alarms and questions, one record per line."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from datetime import datetime

from .model import Question, SecurityOperator, Warning

SEPARATOR = "|"

PathLike = str | os.PathLike


def _write_lines(path: PathLike, lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(f"{line}\n")


def _read_records(path: PathLike, width: int) -> Iterator[list[str]]:
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, 1):
            fields = line.removesuffix("\n").split(SEPARATOR)
            if len(fields) < width:
                raise ValueError(
                    f"{path}:{number}: expected {width} fields, got {len(fields)}"
                )
            yield fields


def _save_operators(path: PathLike, operators: Iterable[SecurityOperator]) -> None:
    _write_lines(
        path,
        (
            SEPARATOR.join((op.name, op.last_name, op.dni, op.password))
            for op in operators
        ),
    )


def _load_operators(path: PathLike) -> list[SecurityOperator]:
    return [
        SecurityOperator(name, last_name, dni, secret)
        for name, last_name, dni, secret, *_ in _read_records(path, 4)
    ]


def save_users(path: PathLike, operators: Iterable[SecurityOperator]) -> None:
    """Write registered operators as ``name|last_name|dni|password`` lines."""
    _save_operators(path, operators)


def load_users(path: PathLike) -> list[SecurityOperator]:
    """Read registered operators written by :func:`save_users`."""
    return _load_operators(path)


def save_pending_operators(
    path: PathLike, operators: Iterable[SecurityOperator]
) -> None:
    """Write operators awaiting validation, in the same format as users."""
    _save_operators(path, operators)


def load_pending_operators(path: PathLike) -> list[SecurityOperator]:
    """Read operators awaiting validation."""
    return _load_operators(path)


def _format_date(value: datetime | None) -> str:
    return "" if value is None else value.isoformat()


def _parse_date(text: str) -> datetime | None:
    return datetime.fromisoformat(text) if text else None


def save_alarms(path: PathLike, warnings: Iterable[Warning]) -> None:
    """Write alarms as ``type|start|end`` lines with ISO dates."""
    _write_lines(
        path,
        (
            SEPARATOR.join(
                (w.type, _format_date(w.starting_date), _format_date(w.ending_date))
            )
            for w in warnings
        ),
    )


def load_alarms(path: PathLike) -> list[Warning]:
    """Read alarms; a date that cannot be parsed raises ValueError."""
    return [
        Warning(kind, _parse_date(start), _parse_date(end))
        for kind, start, end, *_ in _read_records(path, 3)
    ]


def save_questions(path: PathLike, questions: Iterable[Question]) -> None:
    """Write FAQ entries as ``question|answer`` lines."""
    _write_lines(path, (f"{q.text}{SEPARATOR}{q.answer}" for q in questions))


def load_questions(path: PathLike) -> list[Question]:
    """Read FAQ entries; fields after the answer are ignored."""
    return [Question(text, answer) for text, answer, *_ in _read_records(path, 2)]


def save_new_questions(path: PathLike, questions: Iterable[str]) -> None:
    """Write unanswered questions, one per line."""
    _write_lines(path, questions)


def load_new_questions(path: PathLike) -> list[str]:
    """Read unanswered questions; only the text before a separator is kept."""
    return [fields[0] for fields in _read_records(path, 1)]