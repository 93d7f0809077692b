"""SQL text and parameter assembly for the insert/update helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence


@dataclass(frozen=True)
class Statement:
    text: str
    params: list[Any] = field(default_factory=list)


def strip_nulls(record: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``record`` without the keys whose value is None."""
    return {key: value for key, value in record.items() if value is not None}


def _placeholder(index: int) -> str:
    return f"${index}"


def build_insert(
    record: Mapping[str, Any],
    table_name: str,
    returning: Sequence[str] | None = None,
) -> Statement | None:
    """Build an INSERT for the non-null columns of ``record``.

    Placeholders are numbered from 1 in key order. Returns None when every
    value in the record is None.
    """
    values = strip_nulls(record)
    if not values:
        return None

    columns = ", ".join(values)
    placeholders = ", ".join(_placeholder(i) for i in range(1, len(values) + 1))
    text = f"INSERT INTO {table_name} ({columns}) VALUES ({placeholders})"
    if returning:
        text += f" RETURNING {', '.join(returning)}"
    return Statement(text, list(values.values()))


def build_update(
    record: Mapping[str, Any],
    table_name: str,
    where: Iterable[Sequence[Any]],
) -> Statement | None:
    """Build an UPDATE setting the non-null columns of ``record``.

    SET placeholders take indices 1..k in key order, WHERE placeholders
    continue at k+1 in condition order. Conditions are ``(column, value)``
    pairs joined with AND. Without conditions the WHERE clause is left empty
    and the database rejects the statement. Returns None when every value in
    the record is None.
    """
    values = strip_nulls(record)
    if not values:
        return None

    conditions = [(condition[0], condition[1]) for condition in where]

    set_clauses = [f"{column} = {_placeholder(i)}" for i, column in enumerate(values, start=1)]
    offset = len(set_clauses)
    where_clauses = [
        f"{column} = {_placeholder(offset + i)}"
        for i, (column, _) in enumerate(conditions, start=1)
    ]

    text = f"UPDATE {table_name} SET {', '.join(set_clauses)} WHERE {' AND '.join(where_clauses)}"
    params = list(values.values()) + [value for _, value in conditions]
    return Statement(text, params)
