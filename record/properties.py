"""Metadata for the SGF FF[4] properties.

The table is built once at import time and exposed through a read-only
mapping, so it can be shared freely.  Value parsing itself is left to
``sgfmill``; this module only records what each property means and which
kind of node it belongs to.
"""
from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Optional, Set


class PropertyType(enum.Enum):
    """Kind of node a property belongs to."""

    MOVE = "move"
    SETUP = "setup"
    ROOT = "root"
    GAME_INFO = "game-info"
    NONE = "-"


class PropertyInfo(NamedTuple):
    ident: str
    description: str
    type: PropertyType
    inherit: bool


_MOVE = PropertyType.MOVE
_SETUP = PropertyType.SETUP
_ROOT = PropertyType.ROOT
_INFO = PropertyType.GAME_INFO
_NONE = PropertyType.NONE

_TABLE = [
    ("AB", "Add Black", _SETUP, False),
    ("AE", "Add Empty", _SETUP, False),
    ("AN", "Annotation", _INFO, False),
    ("AP", "Application", _ROOT, False),
    ("AR", "Arrow", _NONE, False),
    ("AS", "Who adds stones", _NONE, False),
    ("AW", "Add White", _SETUP, False),
    ("B", "Black", _MOVE, False),
    ("BL", "Black time left", _MOVE, False),
    ("BM", "Bad move", _MOVE, False),
    ("BR", "Black rank", _INFO, False),
    ("BT", "Black team", _INFO, False),
    ("C", "Comment", _NONE, False),
    ("CA", "Charset", _ROOT, False),
    ("CP", "Copyright", _INFO, False),
    ("CR", "Circle", _NONE, False),
    ("DD", "Dim points", _NONE, True),
    ("DM", "Even position", _NONE, False),
    ("DO", "Doubtful", _MOVE, False),
    ("DT", "Date", _INFO, False),
    ("EV", "Event", _INFO, False),
    ("FF", "Fileformat", _ROOT, False),
    ("FG", "Figure", _NONE, False),
    ("GB", "Good for Black", _NONE, False),
    ("GC", "Game comment", _INFO, False),
    ("GM", "Game", _ROOT, False),
    ("GN", "Game name", _INFO, False),
    ("GW", "Good for White", _NONE, False),
    ("HA", "Handicap", _INFO, False),
    ("HO", "Hotspot", _NONE, False),
    ("IP", "Initial pos.", _INFO, False),
    ("IT", "Interesting", _MOVE, False),
    ("IY", "Invert Y-axis", _INFO, False),
    ("KM", "Komi", _INFO, False),
    ("KO", "Ko", _MOVE, False),
    ("LB", "Label", _NONE, False),
    ("LN", "Line", _NONE, False),
    ("MA", "Mark", _NONE, False),
    ("MN", "Set move number", _MOVE, False),
    ("N", "Nodename", _NONE, False),
    ("OB", "OtStones Black", _MOVE, False),
    ("ON", "Opening", _INFO, False),
    ("OT", "Overtime", _INFO, False),
    ("OW", "OtStones White", _MOVE, False),
    ("PB", "Player Black", _INFO, False),
    ("PC", "Place", _INFO, False),
    ("PL", "Player to play", _SETUP, False),
    ("PM", "Print move mode", _NONE, True),
    ("PW", "Player White", _INFO, False),
    ("RE", "Result", _INFO, False),
    ("RO", "Round", _INFO, False),
    ("RU", "Rules", _INFO, False),
    ("SE", "Markup", _NONE, False),
    ("SL", "Selected", _NONE, False),
    ("SO", "Source", _INFO, False),
    ("SQ", "Square", _NONE, False),
    ("ST", "Style", _ROOT, False),
    ("SU", "Setup type", _INFO, False),
    ("SZ", "Size", _ROOT, False),
    ("TB", "Territory Black", _NONE, False),
    ("TE", "Tesuji", _MOVE, False),
    ("TM", "Timelimit", _INFO, False),
    ("TR", "Triangle", _NONE, False),
    ("TW", "Territory White", _NONE, False),
    ("UC", "Unclear pos", _NONE, False),
    ("US", "User", _INFO, False),
    ("V", "Value", _NONE, False),
    ("VW", "View", _NONE, True),
    ("W", "White", _MOVE, False),
    ("WL", "White time left", _MOVE, False),
    ("WR", "White rank", _INFO, False),
    ("WT", "White team", _INFO, False),
]

PROPERTIES: Mapping[str, PropertyInfo] = MappingProxyType(
    {ident: PropertyInfo(ident, desc, ptype, inherit) for ident, desc, ptype, inherit in _TABLE}
)

del _TABLE


def describe(ident: str) -> Optional[PropertyInfo]:
    """Return the metadata for ``ident`` or ``None`` for unknown properties."""
    return PROPERTIES.get(ident)


def property_types(idents: Iterable[str]) -> Set[PropertyType]:
    """Return the set of node kinds represented by ``idents``."""
    return {PROPERTIES[i].type for i in idents if i in PROPERTIES}


def is_root_node(idents: Iterable[str]) -> bool:
    return PropertyType.ROOT in property_types(idents)


def is_setup_node(idents: Iterable[str]) -> bool:
    return PropertyType.SETUP in property_types(idents)


def is_move_node(idents: Iterable[str]) -> bool:
    return PropertyType.MOVE in property_types(idents)


__all__ = [
    "PROPERTIES",
    "PropertyInfo",
    "PropertyType",
    "describe",
    "is_move_node",
    "is_root_node",
    "is_setup_node",
    "property_types",
]
