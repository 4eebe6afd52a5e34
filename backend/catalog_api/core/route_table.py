"""Route Table Analysis - detects registrations that first-match-wins dispatch makes dead.

The router walks routes in registration order and runs the first one whose
method and path pattern match. A later route is therefore unreachable when an
earlier route with the same method matches everything it matches:

    GET /api/products           (1)
    GET /api/products           (2)  duplicate of (1), never runs
    GET /api/products/{id}      (3)
    GET /api/products/stats     (4)  shadowed by (3), never runs

Invariants:
    - Parameter names are irrelevant: /a/{id} and /a/{product_id} are the same key
    - The earlier registration is always the canonical one in a conflict
    - A trailing {name:path} parameter matches one or more remaining segments
    - HEAD is implied by GET and never reported on its own

Design Decisions:
    - Pure function over (method, path) pairs: the api layer extracts them from
      the FastAPI app, so this module stays framework-free and testable
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

_PARAM = re.compile(r"^\{[^}:]+(?::(?P<convertor>[a-z]+))?\}$")
_ANY_SEGMENT = "{}"
_ANY_REMAINDER = "{*}"


class ConflictKind(str, Enum):
    DUPLICATE = "duplicate"
    SHADOWED = "shadowed"


@dataclass(frozen=True)
class RouteKey:
    """One (method, path pattern) registration, in wire form."""
    method: str
    path: str

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(_normalize_segment(s) for s in self.path.strip("/").split("/"))

    def covers(self, other: "RouteKey") -> bool:
        """True if every request matching `other` also matches this route."""
        if self.method != other.method:
            return False
        mine, theirs = self.segments, other.segments
        if mine and mine[-1] == _ANY_REMAINDER:
            head = mine[:-1]
            return len(theirs) > len(head) and _segments_cover(head, theirs[:len(head)])
        if len(mine) != len(theirs):
            return False
        return _segments_cover(mine, theirs)

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True)
class RouteConflict:
    kind: ConflictKind
    canonical: RouteKey
    dead: RouteKey

    def __str__(self) -> str:
        return f"{self.dead} is {self.kind.value} by earlier {self.canonical}"


def expand_route_keys(
    registrations: Iterable[tuple[str, Iterable[str]]],
) -> list[RouteKey]:
    """(path, methods) pairs in registration order -> flat RouteKey list."""
    keys: list[RouteKey] = []
    for path, methods in registrations:
        method_set = {m.upper() for m in methods}
        if "GET" in method_set:
            method_set.discard("HEAD")
        keys.extend(RouteKey(m, path) for m in sorted(method_set))
    return keys


def find_route_conflicts(keys: Sequence[RouteKey]) -> list[RouteConflict]:
    """Every later key made unreachable by an earlier one, first cover only."""
    conflicts: list[RouteConflict] = []
    for index, later in enumerate(keys):
        for earlier in keys[:index]:
            if not earlier.covers(later):
                continue
            kind = (
                ConflictKind.DUPLICATE
                if earlier.segments == later.segments
                else ConflictKind.SHADOWED
            )
            conflicts.append(RouteConflict(kind, earlier, later))
            break
    return conflicts


def _normalize_segment(segment: str) -> str:
    match = _PARAM.match(segment)
    if not match:
        return segment
    return _ANY_REMAINDER if match.group("convertor") == "path" else _ANY_SEGMENT


def _segments_cover(mine: Sequence[str], theirs: Sequence[str]) -> bool:
    return all(m == _ANY_SEGMENT or m == t for m, t in zip(mine, theirs))
