"""
Generation run: fetch, extract, disambiguate, render, write
"""

import logging
from typing import Any, Dict

from .config.generator_config import GeneratorConfig
from .disambiguator import ensure_unique_names
from .errors import OutputError
from .extractor import extract_state
from .fetch import download_document, load_document
from .models import ProtocolIDs, StateMapping
from .render import render_module

logger = logging.getLogger(__name__)

# Handshake is skipped: it defines no packets
STATES = ("login", "status", "play")


def generate_state(document: Dict[str, Any], state: str) -> StateMapping:
    """Extract and disambiguate one connection state"""
    mapping = ensure_unique_names(extract_state(document, state))
    logger.info(
        f"{state}: {len(mapping.clientbound)} clientbound, "
        f"{len(mapping.serverbound)} serverbound")
    return mapping


def generate_protocol_ids(document: Dict[str, Any]) -> ProtocolIDs:
    """Build the packet ID tables of every state.

    The first error aborts the whole run.
    """
    mappings = {state: generate_state(document, state) for state in STATES}
    return ProtocolIDs(**mappings)


def fetch_document(config: GeneratorConfig) -> Dict[str, Any]:
    if config.input_path:
        return load_document(config.input_path)
    return download_document(config.resolved_url(), config.timeout)


def generate(config: GeneratorConfig) -> str:
    """Run a full generation and return the path written.

    The output file is only written once every state has been extracted
    and rendered.
    """
    document = fetch_document(config)
    ids = generate_protocol_ids(document)
    source = render_module(ids, config.version)

    try:
        with open(config.output, "w", encoding="utf-8") as f:
            f.write(source)
    except OSError as e:
        raise OutputError(f"failed to write {config.output}: {e}") from e

    logger.info(f"Wrote {ids.total()} packet IDs to {config.output}")
    return config.output
