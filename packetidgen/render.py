"""
Rendering of packet ID tables as a Python module
"""

import logging
from typing import List

from .models import DirectionTable, ProtocolIDs

logger = logging.getLogger(__name__)

BANNER = "# This file is automatically generated by packetidgen. DO NOT EDIT."

# Class name and heading comment per state, in output order
STATE_SECTIONS = [
    ("login", "Login", "Login state"),
    ("status", "Status", "Ping state"),
    ("play", "Play", "Play state"),
]

INDENT = "    "


def _render_direction(title: str, table: DirectionTable) -> List[str]:
    lines = [f"{INDENT}# {title}"]
    for packet_id in sorted(table):
        lines.append(f"{INDENT}{table[packet_id]} = {packet_id:#x}")
    return lines


def render_module(ids: ProtocolIDs, version: str) -> str:
    """Render one class of constants per connection state.

    Entries are sorted by packet ID and written in hex. The handshake state
    has no packets and is never rendered.
    """
    lines = [
        BANNER,
        f'"""Packet IDs for Minecraft Java Edition {version}."""',
    ]

    for attr, class_name, heading in STATE_SECTIONS:
        mapping = getattr(ids, attr)
        lines += ["", "", f"# {heading}", f"class {class_name}:"]
        if not len(mapping):
            lines.append(f"{INDENT}pass")
            continue
        lines += _render_direction("Clientbound", mapping.clientbound)
        lines.append("")
        lines += _render_direction("Serverbound", mapping.serverbound)

    logger.debug(f"Rendered {ids.total()} constants")
    return "\n".join(lines) + "\n"
