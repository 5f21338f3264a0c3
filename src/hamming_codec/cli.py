# file: src/hamming_codec/cli.py

"""
Command-line interface for the Hamming codec.

Usage:
    hamming-codec encode 1011
    hamming-codec decode 1111111 --rule textbook
    hamming-codec --language es -v decode 1111011

Prints the result as JSON (same field names as the web API).

Exit status:
    0  success (including a corrected single-bit error)
    1  uncorrectable error position
    2  invalid input or configuration
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import load_config
from .decoder import decode
from .encoder import encode
from .errors import HammingConfigurationError, InvalidInputError
from .messages import LANGUAGES
from .parity import POSITION_RULES

logger = logging.getLogger(__name__)


def setup_logging(config: dict, verbose: bool = False):
    """Configure logging for command-line runs."""
    log_config = config.get('logging', {})
    level = logging.DEBUG if verbose else getattr(
        logging, str(log_config.get('level', 'WARNING')).upper(), logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format=log_config.get('format', '%(asctime)s [%(levelname)s] %(message)s'),
        datefmt=log_config.get('datefmt', '%Y-%m-%d %H:%M:%S'),
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hamming-codec',
        description='Encode and decode bit strings with a Hamming code'
    )
    parser.add_argument('--config', default=None, help='Path to YAML config file')
    parser.add_argument('--rule', choices=POSITION_RULES, default=None,
                        help='Parity group membership rule (overrides config)')
    parser.add_argument('--language', choices=LANGUAGES, default=None,
                        help='Step log language (overrides config)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)
    encode_parser = subparsers.add_parser('encode', help='Encode a payload bit string')
    encode_parser.add_argument('bits', help="Payload, e.g. 1011")
    decode_parser = subparsers.add_parser('decode', help='Decode a received codeword')
    decode_parser.add_argument('bits', help="Received codeword, e.g. 1111011")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except HammingConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(config, args.verbose)

    if args.rule is not None:
        config['hamming']['position_rule'] = args.rule
    if args.language is not None:
        config['hamming']['language'] = args.language

    try:
        if args.command == 'encode':
            result = encode(args.bits, config)
        else:
            result = decode(args.bits, config)
    except (InvalidInputError, HammingConfigurationError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

    if args.command == 'decode' and result.error:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
