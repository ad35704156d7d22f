"""
packetidgen - Minecraft packet ID constant generator

Converts the PrismarineJS minecraft-data ``protocol.json`` into a module of
packet ID constants, one class per connection state.

Usage:
    from packetidgen import generate_protocol_ids, load_document

    document = load_document("protocol.json")
    ids = generate_protocol_ids(document)
    print(ids.play.clientbound[0x00])  # SpawnEntity

Or from the command line:
    packetidgen --version 1.17.1 --output packetid.py
"""

__version__ = "0.1.0"

from .config import GeneratorConfig, ConfigValidationError
from .disambiguator import ensure_unique_names
from .errors import (
    PacketIDGenError, ProtocolDocumentError, NotFoundError, TypeMismatchError,
    ParseError, FetchError, OutputError,
)
from .extractor import extract_state, parse_packet_id, to_camel
from .fetch import download_document, load_document
from .generator import STATES, generate, generate_protocol_ids
from .models import DirectionTable, StateMapping, ProtocolIDs
from .render import render_module

__all__ = [
    'GeneratorConfig',
    'ConfigValidationError',
    'ensure_unique_names',
    'PacketIDGenError',
    'ProtocolDocumentError',
    'NotFoundError',
    'TypeMismatchError',
    'ParseError',
    'FetchError',
    'OutputError',
    'extract_state',
    'parse_packet_id',
    'to_camel',
    'download_document',
    'load_document',
    'STATES',
    'generate',
    'generate_protocol_ids',
    'DirectionTable',
    'StateMapping',
    'ProtocolIDs',
    'render_module',
]
