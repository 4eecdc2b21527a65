"""Interactive shell for Slang. Uses cmd as backend.

Lines are evaluated one at a time against a single Interpreter. `exit` ends
the session and `load <path>` evaluates a file as if it had been typed. Errors
are printed and the loop carries on with the next line.
"""

from __future__ import annotations

import cmd
import logging

from termcolor import colored

from slang.config import get_prompt
from slang.errors import SlangError
from slang.interpreter import Interpreter, resolve_path
from slang.printer import render

logger = logging.getLogger(__name__)


def format_error(message: str) -> str:
    return colored("error: ", "red", attrs=["bold"]) + message


class Shell(cmd.Cmd):
    """Slang interpreter shell."""
    intro = "Slang interpreter\nType 'exit' to quit, 'load <path>' to evaluate a file."

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter or Interpreter()
        self.prompt = get_prompt()

    def run(self, code: str) -> None:
        """Evaluate `code` and print the result or the error."""
        try:
            result = self.interpreter.eval(code)
        except SlangError as ex:
            print(format_error(str(ex)), file=self.stdout)
        except RecursionError:
            self.interpreter.reset()
            print(format_error("maximum recursion depth exceeded"), file=self.stdout)
        else:
            print(render(result), file=self.stdout)

    def default(self, line):
        """Evaluates an arbitrary Slang expression."""
        self.run(line)

    def do_load(self, arg):
        """load <path>: evaluate the contents of a file."""
        path = arg.strip()
        if not path:
            print(format_error("load expects a path"), file=self.stdout)
            return
        try:
            code = resolve_path(path).read_text(encoding="utf-8")
        except SlangError as ex:
            print(format_error(str(ex)), file=self.stdout)
            return
        except OSError as ex:
            print(format_error(f"{ex.strerror} ({path})"), file=self.stdout)
            return
        logger.debug("loaded %s", path)
        self.run(code)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
