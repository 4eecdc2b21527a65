"""Command-line entry point: run a Slang file, or start the shell."""

import argparse
import logging
import sys

from slang.config import get_log_level, get_recursion_limit
from slang.errors import SlangError
from slang.interpreter import Interpreter
from slang.printer import render
from slang.repl import Shell, format_error


def main(argv=None):
    parser = argparse.ArgumentParser(prog="sl", description="Slang expression interpreter")
    parser.add_argument("file", help="file to evaluate (if empty, starts the interactive shell)", nargs="?")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(get_recursion_limit())

    interpreter = Interpreter()
    if args.file is None:
        Shell(interpreter).cmdloop()
        return 0

    try:
        result = interpreter.load(args.file)
    except SlangError as ex:
        print(format_error(str(ex)), file=sys.stderr)
        return 1
    except RecursionError:
        print(format_error("maximum recursion depth exceeded"), file=sys.stderr)
        return 1
    print(render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
