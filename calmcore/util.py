"""Command splitting, process spawning and debug logging."""

from __future__ import annotations

import os
import sys

MAXARGLEN = 20
_DELIMITERS = " \t"


def _strsep(text: str) -> tuple[str, str | None]:
    positions = [p for p in (text.find(d) for d in _DELIMITERS) if p != -1]
    if not positions:
        return text, None
    cut = min(positions)
    return text[:cut], text[cut + 1 :]


def _warn(subject: str, reason: str) -> None:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "calmcore"
    print(f"{prog}: {subject}: {reason}", file=sys.stderr, flush=True)


def split_command(argstr: str) -> list[str]:
    """Split a command line on blanks, honouring a quoted argument.

    A word that follows a delimiter and starts with a single or double
    quote runs up to the matching closing quote.  At most
    ``MAXARGLEN - 2`` words are taken, plus one trailing quoted word.
    """
    args: list[str] = []
    rest: str | None = argstr
    while len(args) < MAXARGLEN - 2 and rest is not None:
        token, rest = _strsep(rest)
        if token == "":
            continue
        args.append(token)
        if rest is not None and rest[:1] in ('"', "'"):
            closing = rest.find(rest[0], 1)
            if closing != -1:
                args.append(rest[1:closing])
                rest = rest[closing + 1 :]
    return args


def exec_command(argstr: str) -> None:
    """Replace the current process with the command in ``argstr``.

    Returns only if the command could not be executed, after printing a
    warning to standard error.
    """
    args = split_command(argstr)
    if not args:
        _warn(argstr, "no command given")
        return
    try:
        os.setsid()
    except OSError:
        pass
    try:
        os.execvp(args[0], args)
    except OSError as exc:
        _warn(argstr, exc.strerror or str(exc))


def spawn(argstr: str) -> int | None:
    """Run ``argstr`` in a forked child process; return the child's pid."""
    try:
        pid = os.fork()
    except OSError as exc:
        _warn("fork", exc.strerror or str(exc))
        return None
    if pid == 0:
        try:
            exec_command(argstr)
        finally:
            os._exit(1)
    return pid


def join_argv(argv: list[str] | None) -> str | None:
    """Join arguments with single spaces; ``None`` for a missing or empty list."""
    if not argv:
        return None
    return " ".join(argv)


def log_debug(debug: int, level: int, func: str, msg: str, *args: object) -> None:
    """Write a debug line to standard error when ``debug`` reaches ``level``."""
    if debug < level:
        return
    text = msg % args if args else msg
    sys.stderr.write(f"debug{level}: {func}: {text}\n")
    sys.stderr.flush()