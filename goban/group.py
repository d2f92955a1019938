"""Connected groups of stones and the flood-fill partition of a position.

A :class:`Group` is a plain value: a colour and the set of locations it
occupies.  It keeps no reference to the board it came from, so anything that
depends on the current position (liberties in particular) is computed by the
board from a freshly derived group.
"""
from __future__ import annotations

from typing import (
    AbstractSet,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
    Union,
)

from .location import Location
from .stone import Stone

Occupancy = Union[Mapping[Location, Stone], Iterable[Tuple[Location, Stone]]]


class Group:
    """A maximal connected set of same-coloured stones."""

    __slots__ = ("_colour", "_members")

    def __init__(self, colour: Stone, members: Iterable[Location]) -> None:
        """Create a group of ``colour`` occupying ``members``."""
        self._colour = colour
        self._members: FrozenSet[Location] = frozenset(members)
        if not self._members:
            raise ValueError("a group needs at least one stone")

    @property
    def colour(self) -> Stone:
        return self._colour

    @property
    def members(self) -> FrozenSet[Location]:
        return self._members

    # ------------------------------------------------------------------
    # Membership and adjacency
    # ------------------------------------------------------------------
    def contains(self, loc: Location) -> bool:
        """Return ``True`` if ``loc`` is one of the group's stones."""
        return loc in self._members

    def has(self, colour: Stone, loc: Location) -> bool:
        """Return ``True`` if a ``colour`` stone at ``loc`` belongs to the group."""
        return self._colour is colour and loc in self._members

    def adjacent(self, colour: Stone, loc: Location) -> bool:
        """Return ``True`` if a ``colour`` stone at ``loc`` would touch the group.

        ``loc`` itself must not already be a member.
        """
        if self._colour is not colour or loc in self._members:
            return False
        return any(n in self._members for n in loc.neighbours())

    def group_adjacent(self, other: "Group") -> bool:
        """Return ``True`` if ``other`` has the same colour and touches this group."""
        assert self._members.isdisjoint(other._members), "groups overlap"
        return self._colour is other._colour and any(
            self.adjacent(other._colour, loc) for loc in other._members
        )

    def merge(self, other: "Group") -> Optional["Group"]:
        """Return the union of both groups, or ``None`` if the colours differ."""
        if self._colour is not other._colour:
            return None
        return Group(self._colour, self._members | other._members)

    def neighbours(self) -> Set[Location]:
        """Return the locations bordering the group.

        Internal points are excluded.  The far board edge is not applied, so
        the result may contain off-board candidates.
        """
        border: Set[Location] = set()
        for loc in self._members:
            border.update(loc.neighbours())
        return border - self._members

    # ------------------------------------------------------------------
    # Python protocol helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._members)

    def __contains__(self, loc: object) -> bool:
        return loc in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._colour is other._colour and self._members == other._members

    def __hash__(self) -> int:
        return hash((self._colour, self._members))

    def __repr__(self) -> str:
        return f"Group({self._colour!r}, {sorted(self._members, key=_sort_key)!r})"

    def __str__(self) -> str:
        stones = " ".join(str(loc) for loc in sorted(self._members, key=_sort_key))
        return f"{self._colour} [ {stones} ]"


def _sort_key(loc: Location) -> Tuple[int, int]:
    return loc.col, loc.row


def expand(seed: Location, candidates: AbstractSet[Location]) -> Set[Location]:
    """Grow a group from ``seed`` through ``candidates``.

    ``candidates`` holds the locations still available to the group (stones of
    the seed's colour).  Each round takes the neighbour fringe of the
    stones added in the previous round, keeps the candidates not yet claimed
    and stops once a round adds nothing.
    """
    members = {seed}
    fringe = {seed}
    while fringe:
        reached = set()
        for loc in fringe:
            for n in loc.neighbours():
                if n in candidates and n not in members:
                    reached.add(n)
        members |= reached
        fringe = reached
    return members


def partition(occupancy: Occupancy, colour: Optional[Stone] = None) -> List[Group]:
    """Split a position into its maximal connected single-coloured groups.

    Parameters
    ----------
    occupancy:
        Mapping (or iterable of pairs) from location to stone colour.  It is
        copied, never modified.
    colour:
        When given, only groups of this colour are returned.

    Returns
    -------
    list of Group
        Every stone of the requested colour(s) belongs to exactly one group.
        The order of the list is unspecified.
    """
    stones = dict(occupancy)
    unassigned: Dict[Stone, Set[Location]] = {Stone.BLACK: set(), Stone.WHITE: set()}
    for loc, stone in stones.items():
        if colour is None or stone is colour:
            unassigned[stone].add(loc)

    groups: List[Group] = []
    for stone, remaining in unassigned.items():
        while remaining:
            seed = next(iter(remaining))
            members = expand(seed, remaining)
            remaining -= members
            groups.append(Group(stone, members))
    return groups


__all__ = ["Group", "Occupancy", "expand", "partition"]
