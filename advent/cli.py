"""The ``advent`` command line."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from advent import commands
from advent.day import Day

_U8_PATTERN = re.compile(r"\+?[0-9]+")


def _take_flag(args: list[str], flag: str) -> bool:
    if flag in args:
        args.remove(flag)
        return True
    return False


def _take_value(args: list[str], option: str) -> str | None:
    for i, arg in enumerate(args):
        if arg == option:
            if i + 1 >= len(args):
                raise ValueError(f"the '{option}' option doesn't have an associated value")
            value = args[i + 1]
            del args[i : i + 2]
            return value
        if arg.startswith(option + "="):
            del args[i]
            return arg[len(option) + 1 :]
    return None


def _take_free(args: list[str]) -> str:
    if not args:
        raise ValueError("the 'free-standing' argument is missing")
    return args.pop(0)


def _parse_u8(text: str, option: str) -> int:
    if not _U8_PATTERN.fullmatch(text) or int(text) > 0xFF:
        raise ValueError(f"failed to parse '{text}' for '{option}'")
    return int(text)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse a command and its options.

    Exits for a missing or unknown command; raises ValueError for bad arguments.
    """
    args = list(argv)
    command = args.pop(0) if args and not args[0].startswith("-") else None
    ns = argparse.Namespace(
        command=command,
        day=None,
        release=False,
        dhat=False,
        submit=None,
        download=False,
        overwrite=False,
        all=False,
        store=False,
    )

    if command == "all":
        ns.release = _take_flag(args, "--release")
    elif command == "time":
        ns.all = _take_flag(args, "--all")
        ns.store = _take_flag(args, "--store")
        ns.day = Day.parse(args.pop(0)) if args else None
    elif command in ("download", "read"):
        ns.day = Day.parse(_take_free(args))
    elif command == "scaffold":
        ns.download = _take_flag(args, "--download")
        ns.overwrite = _take_flag(args, "--overwrite")
        ns.day = Day.parse(_take_free(args))
    elif command == "solve":
        ns.release = _take_flag(args, "--release")
        ns.dhat = _take_flag(args, "--dhat")
        submit = _take_value(args, "--submit")
        ns.submit = None if submit is None else _parse_u8(submit, "--submit")
        ns.day = Day.parse(_take_free(args))
    elif command == "today":
        pass
    elif command is not None:
        sys.exit(f"Unknown command: {command}")
    else:
        sys.exit("No command specified.")

    if args:
        listed = ", ".join(f'"{a}"' for a in args)
        print(f"Warning: unknown argument(s): [{listed}].", file=sys.stderr)
    return ns


def main(argv: Sequence[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.command == "all":
        commands.handle_all(args.release)
    elif args.command == "time":
        commands.handle_time(args.day, args.all, args.store)
    elif args.command == "download":
        commands.handle_download(args.day)
    elif args.command == "read":
        commands.handle_read(args.day)
    elif args.command == "scaffold":
        commands.handle_scaffold(args.day, args.overwrite)
        if args.download:
            commands.handle_download(args.day)
    elif args.command == "solve":
        commands.handle_solve(args.day, args.release, args.dhat, args.submit)
    elif args.command == "today":
        day = Day.today()
        if day is None:
            sys.exit(
                "`today` command can only be run between the 1st and the 25th of december. "
                "Please use `scaffold` with a specific day."
            )
        commands.handle_scaffold(day, False)
        commands.handle_download(day)
        commands.handle_read(day)