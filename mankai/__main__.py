"""Line-oriented REPL: one or more expressions per line, results on stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from mankai import config
from mankai.errors import MankaiError, MankaiLexError, MankaiSyntaxError
from mankai.interpreter import Interpreter
from mankai.printer import to_string
from mankai.reader.parser import read

logger = logging.getLogger("mankai.repl")


def format_error(err: BaseException) -> str:
    if isinstance(err, MankaiLexError):
        return f"Lexing error at {err.position}: {err.message}"
    if isinstance(err, MankaiSyntaxError):
        return f"Parsing error: {err}"
    if isinstance(err, RecursionError):
        return "Runtime error: maximum recursion depth exceeded"
    return f"Runtime error: {err}"


def run_line(interpreter: Interpreter, line: str, out: TextIO, err: TextIO) -> bool:
    """Evaluate one line and print its result or error. Returns success."""
    try:
        exprs = read(line)
        if not exprs:
            return True
        value = interpreter.eval_forms(exprs)
    except (MankaiError, RecursionError) as e:
        logger.debug("line failed: %r", line, exc_info=True)
        print(format_error(e), file=err)
        return False
    print(to_string(value), file=out)
    return True


def repl(stdin: TextIO | None = None, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    interpreter = Interpreter()
    interactive = stdin.isatty()
    prompt = config.get_prompt()
    while True:
        if interactive:
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        run_line(interpreter, line, stdout, stderr)
    return 0


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    logger.debug("starting REPL (recursion limit %d)", sys.getrecursionlimit())
    return repl()


if __name__ == "__main__":
    sys.exit(main())
