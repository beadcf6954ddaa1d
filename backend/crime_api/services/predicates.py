"""Parameterized WHERE-clause fragments.

A fragment carries its SQL text and the values bound to it. Only column names
chosen by this package appear in the text; every request value is bound.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


def _check_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Not a plain SQL identifier: {name!r}")
    return name


@dataclass(frozen=True)
class Predicate:
    """SQL condition plus its bound parameters, in the order they appear."""

    sql: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.sql)


EMPTY = Predicate()


def in_clause(
    column: str, values: Sequence[Any] | None, param_prefix: str | None = None
) -> Predicate:
    """``column IN (:p_0, :p_1, ...)`` bound to ``values``, or EMPTY for no values."""
    _check_identifier(column)
    if not values:
        return EMPTY

    prefix = _check_identifier(param_prefix or column.replace(".", "_"))
    params = {f"{prefix}_{i}": value for i, value in enumerate(values)}
    placeholders = ", ".join(f":{name}" for name in params)
    return Predicate(f"{column} IN ({placeholders})", params)


def _date_bound(column: str, op: str, param: str, value: str | None) -> Predicate:
    _check_identifier(column)
    _check_identifier(param)
    if not value:
        return EMPTY
    return Predicate(f"date({column}) {op} date(:{param})", {param: value})


def date_on_or_after(column: str, value: str | None, param: str = "start_date") -> Predicate:
    """Inclusive lower bound on the calendar date of ``column``."""
    return _date_bound(column, ">=", param, value)


def date_on_or_before(column: str, value: str | None, param: str = "end_date") -> Predicate:
    """Inclusive upper bound on the calendar date of ``column``."""
    return _date_bound(column, "<=", param, value)


def all_of(*predicates: Predicate) -> Predicate:
    """AND together the non-empty predicates; EMPTY if there are none."""
    present = [p for p in predicates if p]
    if not present:
        return EMPTY

    params: dict[str, Any] = {}
    for predicate in present:
        duplicate = params.keys() & predicate.params.keys()
        if duplicate:
            raise ValueError(f"Parameter names bound twice: {sorted(duplicate)}")
        params.update(predicate.params)

    return Predicate(" AND ".join(p.sql for p in present), params)


def where_clause(predicate: Predicate) -> str:
    """Render ``WHERE ...`` for a non-empty predicate, or an empty string."""
    return f"WHERE {predicate.sql}" if predicate else ""
