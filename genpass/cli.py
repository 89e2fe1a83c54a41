"""
Command-line front end: generate one password and optionally describe it.

    genpass [-h] [-a] [-l] [-u] [-n] [-s] [-b] [-B] [-e] [-c] [-v] [length]

Note that -h selects the hex charset; use --help for usage.
"""

from __future__ import annotations

import argparse
import base64
import binascii
import logging
import sys
from typing import List, Optional

from .charsets import build_charset, normalize_charset
from .collision import collision_seconds
from .config import GenpassConfig, DEFAULT_CONFIG
from .duration import format_duration
from .entropy_source import EntropySourceError
from .passwords import entropy_bits, generate, possible_passwords, rate_entropy

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="genpass",
        description="Generate a random password using a cryptographically secure source",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")

    # Charset selection
    parser.add_argument("-h", "--hex", action="store_true", help="a-f0-9")
    parser.add_argument("-a", "--alpha", action="store_true", help="a-zA-Z")
    parser.add_argument("-l", "--lower", action="store_true", help="a-z")
    parser.add_argument("-u", "--upper", action="store_true", help="A-Z")
    parser.add_argument("-n", "--number", action="store_true", help="0-9")
    parser.add_argument("-s", "--special", action="store_true", help="!@#$%%^&*()_")

    # Output
    parser.add_argument("-b", "--bytes", action="store_true", help="interpret length as bytes (hex only)")
    parser.add_argument(
        "-B",
        "--base64",
        action="store_true",
        help="show base64 (raw url) encoding of raw bytes (hex only)",
    )
    parser.add_argument("-e", "--entropy", action="store_true", help="show entropy")
    parser.add_argument("-c", "--collisions", action="store_true", help="show collision information")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")

    parser.add_argument("length", nargs="?", default=str(DEFAULT_CONFIG.length), help="password length")
    return parser.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> GenpassConfig:
    try:
        length = int(args.length)
    except ValueError:
        raise ValueError("invalid length") from None
    if length < 0:
        raise ValueError("invalid length")

    if args.bytes and args.hex:
        length *= 2
    if args.base64 and args.hex and length % 2 != 0:
        raise ValueError("length must be a multiple of 2 for base64 encoding")

    charset = build_charset(
        hex=args.hex,
        alpha=args.alpha,
        lower=args.lower,
        upper=args.upper,
        number=args.number,
        special=args.special,
    )
    return GenpassConfig(length=length, charset=charset)


def run(args: argparse.Namespace) -> None:
    cfg = _config_from_args(args)
    charset = normalize_charset(cfg.charset)
    password = generate(charset, cfg.length)

    print(password)

    if args.base64 and args.hex:
        try:
            raw = binascii.unhexlify(password)
        except binascii.Error as exc:
            raise ValueError("failed to decode hex") from exc
        encoded = base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
        print(f"base64url: {encoded}")

    if args.entropy:
        bits = entropy_bits(len(charset), cfg.length)
        print(f"Charset: {charset}")
        print(f"Entropy: {bits:.2f} bits ({rate_entropy(bits)})")

    if args.collisions:
        if not args.entropy:
            # need to print charset
            print(f"Charset: {charset}")
        possible = possible_passwords(len(charset), cfg.length)
        print(f"Possible passwords: {possible}")
        seconds = collision_seconds(possible, cfg.collision_probability)
        print(f"Time until 1% chance of at least one collision: {format_duration(seconds)}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        run(args)
    except (ValueError, EntropySourceError) as exc:
        logger.debug("aborting", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
