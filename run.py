import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter

from pgtypes.adapters.wire import NumericCodec, WireFormat
from pgtypes.domain.values import Numeric
from pgtypes.shared.config import get_settings
from pgtypes.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)

OPERATORS = ("+", "-", "*", "/", "//", "%", "cmp")


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="pgtypes numeric toolbox",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    calc_parser = subparsers.add_parser("calc", help="Evaluate <x> <op> <y>.")
    calc_parser.add_argument("x")
    calc_parser.add_argument("op", choices=OPERATORS)
    calc_parser.add_argument("y")
    calc_parser.add_argument(
        "--scale",
        type=int,
        default=None,
        help="Fractional digits for '/' (default: chosen like PostgreSQL)",
    )
    calc_parser.add_argument(
        "--truncate",
        action="store_true",
        help="Truncate instead of rounding when --scale is given",
    )
    calc_parser.set_defaults(func=run_calc)

    encode_parser = subparsers.add_parser("encode", help="Print the wire payload of a literal as hex.")
    encode_parser.add_argument("literal")
    encode_parser.add_argument("--format", choices=("binary", "text"), default=None)
    encode_parser.set_defaults(func=run_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode a hex wire payload.")
    decode_parser.add_argument("payload")
    decode_parser.add_argument("--format", choices=("binary", "text"), default=None)
    decode_parser.set_defaults(func=run_decode)

    return parser


def calculate(x: Numeric, op: str, y: Numeric, scale=None, truncate: bool = False) -> str:
    if op == "+":
        return str(x + y)
    if op == "-":
        return str(x - y)
    if op == "*":
        return str(x * y)
    if op == "/":
        if scale is None:
            return str(x / y)
        return str(x.quo_prec(y, scale, round_=not truncate))
    if op == "//":
        return str(x // y)
    if op == "%":
        return str(x % y)
    if op == "cmp":
        return str(x.cmp(y))
    raise ValueError(f"Unknown operator: {op}")


def _codec(args: Namespace) -> NumericCodec:
    if args.format is None:
        return NumericCodec.from_settings(get_settings())
    return NumericCodec(WireFormat.from_name(args.format))


def run_calc(args: Namespace) -> None:
    x = Numeric.from_string(args.x)
    y = Numeric.from_string(args.y)

    logger.debug("calc_evaluating", x=str(x), op=args.op, y=str(y), scale=args.scale)

    print(calculate(x, args.op, y, scale=args.scale, truncate=args.truncate))


def run_encode(args: Namespace) -> None:
    codec = _codec(args)
    value = Numeric.from_string(args.literal)

    print(codec.encode(value).hex())


def run_decode(args: Namespace) -> None:
    codec = _codec(args)
    value = codec.decode(bytes.fromhex(args.payload))

    print(value)


def main(argv=None) -> int:
    settings = get_settings()

    configure_logging(
        log_level=settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS,
    )

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.debug("command_starting", command=args.command)

    try:
        args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True,
        )
        return 1

    logger.debug("command_completed", command=args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
