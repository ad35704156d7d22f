"""
Name disambiguation between the two directions of a connection state
"""

import logging
from typing import Dict

from .models import StateMapping

logger = logging.getLogger(__name__)

CLIENTBOUND_SUFFIX = "Clientbound"
SERVERBOUND_SUFFIX = "Serverbound"


def ensure_unique_names(mapping: StateMapping) -> StateMapping:
    """Rename packets whose name is used by both directions.

    ``keep_alive`` sent both ways becomes ``KeepAliveClientbound`` and
    ``KeepAliveServerbound``. IDs and non-colliding names are unchanged.
    The mapping is modified in place and returned. Call once per mapping.
    """
    # Snapshot before renaming so renamed entries never re-collide
    clientbound_ids: Dict[str, int] = {}
    for packet_id, name in mapping.clientbound.items():
        clientbound_ids[name] = packet_id

    for packet_id, name in list(mapping.serverbound.items()):
        clientbound_id = clientbound_ids.get(name)
        if clientbound_id is None:
            continue
        mapping.clientbound[clientbound_id] = name + CLIENTBOUND_SUFFIX
        mapping.serverbound[packet_id] = name + SERVERBOUND_SUFFIX
        logger.debug(
            f"{name} used by both directions "
            f"(clientbound {clientbound_id:#x}, serverbound {packet_id:#x}), renamed")

    return mapping
