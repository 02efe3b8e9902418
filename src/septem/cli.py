import argparse
import sys
from pathlib import Path
from typing import Optional

from septem import __name__ as septem_name
from septem import __version__
from septem.config import ConfigLoader, DefaultConfig
from septem.core.domain import OutOfRange, RomanError, RomanNumeral
from septem.core.math import decode_digits
from septem.logging import configure_logging, get_logger, log_conversion, log_conversion_error

logger = get_logger(septem_name)


def command_line_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="septem",
        description="Convert between integers and Roman numerals",
    )
    parser.add_argument(
        "values",
        nargs="+",
        help="Integers to encode or Roman numerals to decode",
    )
    case = parser.add_mutually_exclusive_group()
    case.add_argument(
        "--lower",
        dest="lowercase",
        action="store_const",
        const=True,
        help="Print numerals in lower case",
    )
    case.add_argument(
        "--upper",
        dest="lowercase",
        action="store_const",
        const=False,
        help="Print numerals in upper case (default)",
    )
    parser.add_argument(
        "--unchecked",
        dest="checked",
        action="store_const",
        const=False,
        help="Accept 0 and values above 3999 when encoding",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-json",
        action="store_const",
        const=True,
        help="Emit logs as JSON",
    )
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument("-V", "--version", action="version", version=__version__)
    return parser


def is_integer_literal(value: str) -> bool:
    return value.isascii() and value.isdigit()


def convert(value: str, config: DefaultConfig) -> str:
    """
    Convert one command line value.

    Integers are encoded, anything else is decoded. RomanError propagates.
    """
    if is_integer_literal(value):
        try:
            n = int(value)
        except ValueError as e:
            # Literal longer than the interpreter's int string limit
            raise OutOfRange(value) from e
        if config.checked:
            numeral = RomanNumeral.from_checked(n)
        else:
            numeral = RomanNumeral.from_unchecked(n)
        result = numeral.to_lower_string() if config.lowercase else numeral.to_upper_string()
        log_conversion(logger, value, result, direction="encode")
    else:
        normalized = "".join(digit.to_upper_char() for digit in decode_digits(value))
        result = str(RomanNumeral.parse(normalized).magnitude())
        log_conversion(logger, value, result, direction="decode", normalized=normalized)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    parser = command_line_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader.create(args.config).merge_config(
            {
                "lowercase": args.lowercase,
                "checked": args.checked,
                "log_level": args.log_level,
                "log_json": args.log_json,
            }
        )
        configure_logging(level=config.log_level, format_json=config.log_json)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    failed = False
    for value in args.values:
        try:
            print(convert(value, config))
        except RomanError as e:
            log_conversion_error(logger, value, e, context={"checked": config.checked})
            print(f"error: {e}", file=sys.stderr)
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
