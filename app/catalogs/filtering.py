"""In-memory search and column filters for catalog lists. Never touches the data service."""

from dataclasses import dataclass
from typing import Any, Hashable, List, Mapping, Optional, Sequence, Tuple

ALL = "all"


@dataclass(frozen=True)
class FilterColumn:
    key: str
    path: str
    # Value assumed for rows that carry none (e.g. legacy careers without status).
    default: Optional[str] = None


def resolve(row: Mapping[str, Any], path: str) -> Any:
    """Follow a dotted path through nested dicts; None when any step is missing."""
    value: Any = row
    for part in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
        if value is None:
            return None
    return value


def _is_active(selection: Any) -> bool:
    return selection is not None and str(selection).strip() not in ("", ALL)


def matches_search(row: Mapping[str, Any], term: str, search_fields: Sequence[str]) -> bool:
    term = (term or "").strip().lower()
    if not term:
        return True
    for path in search_fields:
        value = resolve(row, path)
        if value is not None and term in str(value).lower():
            return True
    return False


def matches_filters(
    row: Mapping[str, Any],
    filter_values: Mapping[str, Any],
    filter_columns: Sequence[FilterColumn],
) -> bool:
    for column in filter_columns:
        selection = filter_values.get(column.key)
        if not _is_active(selection):
            continue
        value = resolve(row, column.path)
        if value is None:
            value = column.default
        if value is None or str(value) != str(selection).strip():
            return False
    return True


def filter_rows(
    rows: Sequence[Mapping[str, Any]],
    search_term: str = "",
    filter_values: Optional[Mapping[str, Any]] = None,
    search_fields: Sequence[str] = (),
    filter_columns: Sequence[FilterColumn] = (),
) -> List[Mapping[str, Any]]:
    filter_values = filter_values or {}
    if not (search_term or "").strip() and not any(_is_active(v) for v in filter_values.values()):
        return list(rows)
    return [
        row
        for row in rows
        if matches_search(row, search_term, search_fields)
        and matches_filters(row, filter_values, filter_columns)
    ]


class RowFilter:
    """Memoized ``filter_rows``: recomputes only when rows version or inputs change."""

    def __init__(self, search_fields: Sequence[str], filter_columns: Sequence[FilterColumn]) -> None:
        self.search_fields = tuple(search_fields)
        self.filter_columns = tuple(filter_columns)
        self.computations = 0
        self._key: Optional[Tuple[Hashable, ...]] = None
        self._result: List[Mapping[str, Any]] = []

    def __call__(
        self,
        rows: Sequence[Mapping[str, Any]],
        version: Hashable,
        search_term: str,
        filter_values: Mapping[str, Any],
    ) -> List[Mapping[str, Any]]:
        key = (version, search_term, tuple(sorted((k, str(v)) for k, v in filter_values.items())))
        if key != self._key:
            self._result = filter_rows(rows, search_term, filter_values, self.search_fields, self.filter_columns)
            self._key = key
            self.computations += 1
        return self._result

