"""radixconv CLI — конверсия чисел между системами счисления.

Usage:
    python -m radixconv convert 1010 -s 2 -t 10
    python -m radixconv convert FF -a 0123456789ABCDEF -b 01
    python -m radixconv convert 10 --target-function factorial
    python -m radixconv convert -c config.json
    python -m radixconv check -s 10 -a 0123456789

Commands:
    convert NUMBER      Convert NUMBER from the source to the target system
    check               Validate both systems without converting anything

Exit codes:
    0   success
    1   conversion or configuration error
    2   usage error
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from radixconv import __version__
from radixconv.config import build_system, description_from_args, load_config
from radixconv.conversion import Converter
from radixconv.core.domain import NumeralSystem
from radixconv.core.errors import ConfigurationError, RadixConversionError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def _system_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("-s", "--source-base", type=int, help="Source base (may be negative)")
    parent.add_argument("-t", "--target-base", type=int, help="Target base (may be negative)")
    parent.add_argument("-a", "--source-alphabet", help="Source alphabet, one symbol per character")
    parent.add_argument("-b", "--target-alphabet", help="Target alphabet, one symbol per character")
    parent.add_argument("--source-function", help="Source base function: expression in n or preset name")
    parent.add_argument("--target-function", help="Target base function: expression in n or preset name")
    parent.add_argument("-c", "--config-file", help="Read both systems from a JSON config file")
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixconv",
        description="Convert numbers between constant and mixed radix numeral systems",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    options = _system_options()

    p_convert = sub.add_parser("convert", parents=[options], help="Convert a number")
    p_convert.add_argument(
        "number", nargs="?", help="Number to convert (optional if the config file has one)"
    )

    sub.add_parser("check", parents=[options], help="Validate both systems")
    return parser


def _per_side_flags(args: argparse.Namespace) -> List[str]:
    names = (
        "source_base",
        "target_base",
        "source_alphabet",
        "target_alphabet",
        "source_function",
        "target_function",
    )
    return [name for name in names if getattr(args, name) is not None]


def resolve_systems(args: argparse.Namespace) -> Tuple[NumeralSystem, NumeralSystem, Optional[str]]:
    """
    Исходная и целевая системы из аргументов.

    Returns:
        (source, target, number из конфига или None)
    """
    if args.config_file:
        conflicting = _per_side_flags(args)
        if conflicting:
            flags = ", ".join("--" + name.replace("_", "-") for name in conflicting)
            raise ConfigurationError(f"--config-file cannot be combined with {flags}")
        description = load_config(args.config_file)
        return build_system(description.source), build_system(description.target), description.number

    source = description_from_args(args.source_base, args.source_alphabet, args.source_function)
    target = description_from_args(args.target_base, args.target_alphabet, args.target_function)
    return build_system(source), build_system(target), None


def _run_convert(args: argparse.Namespace) -> int:
    source, target, config_number = resolve_systems(args)
    number = args.number if args.number is not None else config_number
    if number is None:
        raise ConfigurationError("No number given on the command line or in the config file")

    result = Converter(source, target).convert_literal(number)
    print(result)
    return EXIT_OK


def _run_check(args: argparse.Namespace) -> int:
    source, target, _ = resolve_systems(args)
    Converter(source, target).validate()
    for side, system in (("source", source), ("target", target)):
        print(f"{side}: {system.radix!r}, alphabet of {system.alphabet.base} symbols")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "convert":
            return _run_convert(args)
        return _run_check(args)
    except RadixConversionError as exc:
        logger.debug("conversion failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
