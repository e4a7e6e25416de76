"""Data-quality checks for exits.

Nothing here raises: findings are reported to the caller (the
``validate`` command) and the layout still runs on the same snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from worldmap.parser.model import Direction, Exit, GridPosition, Location

# Portals and unlabeled exits may legitimately repeat
_REPEATABLE = (Direction.ENTER, Direction.UNKNOWN)


@dataclass(frozen=True)
class ExitFinding:
    """A single data-quality problem with a location's exits."""

    kind: str  # "duplicate_direction", "offset_mismatch" or "missing_target"
    location_id: str
    target_id: str
    direction: Direction
    message: str


def exits_by_direction(location: Location) -> dict[Direction, Exit]:
    """Map each direction to its exit, keeping the first one declared."""
    result: dict[Direction, Exit] = {}
    for exit_ in location.exits:
        result.setdefault(exit_.direction, exit_)
    return result


def audit_exits(
    locations: list[Location],
    grid_positions: dict[str, GridPosition] | None = None,
) -> list[ExitFinding]:
    """Report duplicate directions, dangling exits and offset mismatches.

    Offset mismatches are only checked for compass exits, and only when
    ``grid_positions`` is given.
    """
    known = {loc.id for loc in locations}
    findings: list[ExitFinding] = []

    for loc in locations:
        first = exits_by_direction(loc)
        for exit_ in loc.exits:
            if exit_.target_id not in known:
                findings.append(ExitFinding(
                    "missing_target", loc.id, exit_.target_id, exit_.direction,
                    f"'{loc.id}' exits {exit_.direction.value} to unknown "
                    f"location '{exit_.target_id}'",
                ))
                continue

            if (first[exit_.direction] is not exit_
                    and exit_.direction not in _REPEATABLE):
                findings.append(ExitFinding(
                    "duplicate_direction", loc.id, exit_.target_id, exit_.direction,
                    f"'{loc.id}' has more than one {exit_.direction.value} exit; "
                    f"keeping '{first[exit_.direction].target_id}', "
                    f"ignoring '{exit_.target_id}'",
                ))

            if grid_positions is None or not exit_.direction.is_compass:
                continue
            src = grid_positions.get(loc.id)
            tgt = grid_positions.get(exit_.target_id)
            if src is None or tgt is None:
                continue
            actual = (tgt[0] - src[0], tgt[1] - src[1])
            if actual != exit_.direction.grid_offset:
                findings.append(ExitFinding(
                    "offset_mismatch", loc.id, exit_.target_id, exit_.direction,
                    f"'{loc.id}' -> '{exit_.target_id}' is {exit_.direction.value} "
                    f"but cells differ by {actual}",
                ))

    return findings
