"""Dashboard aggregations over in-memory student and course rows.

Legend percentages are rounded independently per item, so a legend may add up
to 99 or 101; the cumulative segment bounds are computed from exact fractions
and always close at 100.
"""

import math
from collections import Counter
from typing import Any, Dict, List, Mapping, Sequence, Tuple

UNKNOWN_STATUS = "Unknown"
NO_CAREER = "No career"
OTHER = "Other"

Distribution = List[Tuple[str, int]]


def count_by(keys: Sequence[Any]) -> Distribution:
    """Count occurrences, preserving first-seen order."""
    return list(Counter(keys).items())


def status_distribution(students: Sequence[Mapping[str, Any]]) -> Distribution:
    return count_by([s.get("status") or UNKNOWN_STATUS for s in students])


def career_distribution(
    students: Sequence[Mapping[str, Any]],
    max_groups: int = 5,
    keep: int = 4,
) -> Distribution:
    """Students per career name, largest first; beyond ``max_groups`` the tail collapses into "Other"."""
    names = [((s.get("career") or {}).get("name")) or NO_CAREER for s in students]
    ranked = sorted(count_by(names), key=lambda item: item[1], reverse=True)
    if len(ranked) <= max_groups:
        return ranked
    head = ranked[:keep]
    other = sum(n for _, n in ranked[keep:])
    return head + [(OTHER, other)]


def course_ranking(
    students: Sequence[Mapping[str, Any]],
    courses: Sequence[Mapping[str, Any]],
    limit: int = 5,
) -> List[Dict[str, Any]]:
    counts = Counter(s.get("course_id") for s in students if s.get("course_id"))
    ranking = [
        {"id": c["id"], "name": c.get("name"), "students": counts.get(c["id"], 0)}
        for c in courses
    ]
    ranking = [item for item in ranking if item["students"] > 0]
    ranking.sort(key=lambda item: item["students"], reverse=True)
    return ranking[:limit]


def percent(value: int, total: int) -> int:
    if not total:
        return 0
    # Half-up, so 12.5 shows as 13.
    return int(math.floor(value / total * 100 + 0.5))


def chart_items(distribution: Distribution) -> List[Dict[str, Any]]:
    """Attach legend percent and cumulative [start, end) segment bounds to each item."""
    total = sum(n for _, n in distribution)
    items = []
    current = 0.0
    for index, (label, n) in enumerate(distribution):
        end = current + (n / total * 100 if total else 0.0)
        if total and index == len(distribution) - 1:
            end = 100.0
        items.append(
            {
                "label": label,
                "value": n,
                "percent": percent(n, total),
                "start": current,
                "end": end,
            }
        )
        current = end
    return items
