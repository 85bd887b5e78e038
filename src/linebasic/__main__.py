import argparse
import logging
import sys
from pathlib import Path

from .common import BasicError
from .main import Interpreter
from .repl import Repl


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m linebasic",
        usage="python -m linebasic [options] [program.bas]",
    )
    parser.add_argument("program", nargs="?", help="program to load and run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each executed line")
    parser.add_argument("--seed", type=int, default=None, help="seed for rnd")
    parser.add_argument("--no-banner", action="store_true", help="start the prompt silently")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args_list = sys.argv[1:] if argv is None else argv
    try:
        args = parser.parse_args(args_list)
    except SystemExit as exc:
        return int(exc.code)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    interpreter = Interpreter(seed=args.seed)

    if args.program is None:
        Repl(interpreter, banner=not args.no_banner).loop()
        return 0

    program_path = Path(args.program).resolve()
    if not program_path.is_file():
        print(f"linebasic: program not found: {program_path}", file=sys.stderr)
        return 2
    try:
        interpreter.load(program_path)
    except BasicError as exc:
        print(exc, file=sys.stderr)
        return 1
    result = interpreter.run()
    if not result.ok:
        print(result.exception, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
