"""
packetidgen command line interface

Usage:
    packetidgen                          # download 1.17.1, write packetid.py
    packetidgen --version 1.16.5 --output packets.py
    packetidgen --input protocol.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import GeneratorConfig
from .config.validation import log_level_value
from .errors import PacketIDGenError
from .generator import generate
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packetidgen",
        description="Generate Minecraft packet ID constants from minecraft-data's protocol.json")
    parser.add_argument("--version", help="Protocol version to download (default: %(default)s)",
                        default=GeneratorConfig.version)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Download protocol.json from this URL instead")
    source.add_argument("--input", dest="input_path", metavar="FILE",
                        help="Read protocol.json from a local file")
    parser.add_argument("--output", "-o", default=GeneratorConfig.output,
                        help="Output file (default: %(default)s)")
    parser.add_argument("--timeout", type=float, default=GeneratorConfig.timeout,
                        help="Download timeout in seconds (default: %(default)s)")
    parser.add_argument("--log-level", default=GeneratorConfig.log_level,
                        help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = GeneratorConfig()
    config.update(**vars(args))

    try:
        config.validate()
        configure_logging(log_level_value(config.log_level))
        logger.debug(f"Configuration: {config.to_dict()}")

        print(f"generating {config.output}")
        generate(config)
    except PacketIDGenError as e:
        print(f"packetidgen: error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
