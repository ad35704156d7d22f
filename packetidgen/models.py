"""
Packet ID tables produced by a generation run
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

# Packet ID -> canonical packet name
DirectionTable = Dict[int, str]


@dataclass
class StateMapping:
    """Clientbound and serverbound tables for one connection state"""
    clientbound: DirectionTable = field(default_factory=dict)
    serverbound: DirectionTable = field(default_factory=dict)

    def ensure_unique_names(self) -> 'StateMapping':
        """Rename names used by both directions (see disambiguator)"""
        from .disambiguator import ensure_unique_names
        return ensure_unique_names(self)

    def directions(self) -> Iterator[Tuple[str, DirectionTable]]:
        yield "Clientbound", self.clientbound
        yield "Serverbound", self.serverbound

    def __len__(self) -> int:
        return len(self.clientbound) + len(self.serverbound)


@dataclass
class ProtocolIDs:
    """All packet IDs for one protocol version. Handshake defines no packets."""
    login: StateMapping
    status: StateMapping
    play: StateMapping

    def states(self) -> Iterator[Tuple[str, StateMapping]]:
        yield "login", self.login
        yield "status", self.status
        yield "play", self.play

    def total(self) -> int:
        return sum(len(mapping) for _, mapping in self.states())
