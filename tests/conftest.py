"""
Shared fixtures: minimal minecraft-data protocol documents
"""

import copy

import pytest


def packet_section(mappings):
    """A ``<state>.<direction>`` section shaped like minecraft-data's"""
    return {
        "types": {
            "packet": [
                "container",
                [
                    {
                        "name": "name",
                        "type": ["mapper", {"type": "varint", "mappings": dict(mappings)}],
                    },
                    {
                        "name": "params",
                        "type": ["switch", {"compareTo": "name", "fields": {}}],
                    },
                ],
            ]
        }
    }


MINIMAL_MAPPINGS = {
    "login": {
        "toClient": {"0x00": "disconnect", "0x01": "encryption_begin", "0x02": "success"},
        "toServer": {"0x00": "login_start", "0x01": "encryption_begin_response"},
    },
    "status": {
        "toClient": {"0x00": "server_info", "0x01": "pong"},
        "toServer": {"0x00": "ping_start", "0x01": "ping"},
    },
    "play": {
        "toClient": {"0x00": "spawn_entity", "0x21": "keep_alive"},
        "toServer": {"0x00": "chat", "0x0f": "keep_alive_response"},
    },
}


def build_document(mappings):
    document = {
        "types": {"varint": "native"},
        "handshaking": {
            "toClient": {"types": {}},
            "toServer": packet_section({"0x00": "set_protocol", "0xfe": "legacy_server_list_ping"}),
        },
    }
    for state, directions in mappings.items():
        document[state] = {
            direction: packet_section(entries)
            for direction, entries in directions.items()
        }
    return document


@pytest.fixture
def make_document():
    """Factory for documents; takes ``{state: {direction: mappings}}``"""
    return build_document


@pytest.fixture
def minimal_document():
    """A document for login, status and play without name collisions"""
    return build_document(copy.deepcopy(MINIMAL_MAPPINGS))


@pytest.fixture
def minimal_mappings():
    """The raw mappings behind ``minimal_document``"""
    return copy.deepcopy(MINIMAL_MAPPINGS)
