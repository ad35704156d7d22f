"""
Packet ID extraction from a minecraft-data protocol document

The document is the decoded ``protocol.json`` published by PrismarineJS. For
every connection state and direction the packet ID mapping sits at::

    <state>.<direction>.types.packet[1][0].type[1].mappings

where ``mappings`` is an object of ``{"0x00": "spawn_entity", ...}``.
"""

import keyword
import logging
import re
from typing import Any, Dict, List, Sequence

from .errors import NotFoundError, ParseError, PathElement, TypeMismatchError
from .models import DirectionTable, StateMapping

logger = logging.getLogger(__name__)

# Direction keys used by minecraft-data
TO_CLIENT = "toClient"
TO_SERVER = "toServer"

MAPPINGS_PATH = ("types", "packet", 1, 0, "type", 1, "mappings")

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_INT_LITERAL = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|0[0-7]*|[1-9][0-9]*)"
)
_LEGACY_OCTAL = re.compile(r"[+-]?0[0-7]+")
_WORD_SEPARATORS = "_ -."


def _type_name(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__


def get_field(container: Any, key: str, path: Sequence[PathElement]) -> Any:
    """Return ``container[key]`` where ``container`` must be a JSON object"""
    if not isinstance(container, dict):
        raise TypeMismatchError(
            f"expected an object, got {_type_name(container)}", path)
    if key not in container:
        raise NotFoundError(f"key {key!r} not found", path)
    return container[key]


def get_index(container: Any, index: int, path: Sequence[PathElement]) -> Any:
    """Return ``container[index]`` where ``container`` must be a JSON array"""
    if not isinstance(container, list):
        raise TypeMismatchError(
            f"expected an array, got {_type_name(container)}", path)
    if index >= len(container):
        raise NotFoundError(
            f"index {index} not found (array has {len(container)} elements)", path)
    return container[index]


def unnest(document: Any, keys: Sequence[PathElement],
           path: Sequence[PathElement] = ()) -> Any:
    """Walk ``keys`` through nested objects and arrays.

    String keys index objects, integer keys index arrays. Errors carry the
    path walked so far.
    """
    current = document
    walked: List[PathElement] = list(path)
    for key in keys:
        if isinstance(key, int):
            current = get_index(current, key, walked)
        else:
            current = get_field(current, key, walked)
        walked.append(key)
    return current


def parse_packet_id(text: Any, path: Sequence[PathElement] = ()) -> int:
    """Parse a mapping key such as ``"0x1f"`` or ``"31"`` into an int.

    The base comes from the prefix (``0x``, ``0o``, ``0b``, or a bare leading
    zero for octal) and the value must fit a signed 32 bit integer.
    """
    if not isinstance(text, str) or not _INT_LITERAL.fullmatch(text):
        raise ParseError(f"invalid packet ID {text!r}", path)

    if _LEGACY_OCTAL.fullmatch(text):
        value = int(text, 8)
    else:
        value = int(text, 0)

    if value < INT32_MIN or value > INT32_MAX:
        raise ParseError(f"packet ID {text!r} out of range", path)
    return value


def to_camel(name: str) -> str:
    """Convert ``spawn_entity`` style names to ``SpawnEntity``"""
    result = []
    capitalize = True
    for char in name.strip():
        if "a" <= char <= "z":
            result.append(char.upper() if capitalize else char)
        elif "A" <= char <= "Z" or "0" <= char <= "9":
            result.append(char)
        elif not result:
            # nothing written yet, the first letter still starts a word
            continue
        # letters following a digit start a new word
        capitalize = char in _WORD_SEPARATORS or char.isspace() or "0" <= char <= "9"

    identifier = "".join(result)
    if identifier[:1].isdigit():
        identifier = "_" + identifier
    # None, True and False
    if keyword.iskeyword(identifier):
        identifier += "_"
    return identifier


def find_mappings(document: Dict[str, Any], state: str, direction: str) -> Dict[str, Any]:
    """Locate the packet ID ``mappings`` object for one state and direction"""
    # packet is ["container", [{"name": "name", "type": ["mapper", {...}]}, ...]]
    path: List[PathElement] = [state, direction, *MAPPINGS_PATH]
    mappings = unnest(document, path)
    if not isinstance(mappings, dict):
        raise TypeMismatchError(
            f"expected an object, got {_type_name(mappings)}", path)
    return mappings


def extract_direction(document: Dict[str, Any], state: str, direction: str) -> DirectionTable:
    """Build the ID -> canonical name table for one state and direction"""
    mappings = find_mappings(document, state, direction)
    path: List[PathElement] = [state, direction, *MAPPINGS_PATH]

    table: DirectionTable = {}
    for key, raw_name in mappings.items():
        packet_id = parse_packet_id(key, path)
        if not isinstance(raw_name, str):
            raise TypeMismatchError(
                f"packet name for {key!r} must be a string, got {_type_name(raw_name)}",
                path)
        name = to_camel(raw_name)
        if not name:
            raise ParseError(f"packet name {raw_name!r} for {key!r} is not usable", path)
        table[packet_id] = name

    logger.debug(f"{state}.{direction}: {len(table)} packets")
    return table


def extract_state(document: Dict[str, Any], state: str) -> StateMapping:
    """Extract both direction tables for a connection state.

    Raises NotFoundError, TypeMismatchError or ParseError on the first
    defect found; nothing is returned for a partially valid state.
    """
    return StateMapping(
        clientbound=extract_direction(document, state, TO_CLIENT),
        serverbound=extract_direction(document, state, TO_SERVER),
    )
