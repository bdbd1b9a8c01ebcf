"""chrklst command-line interface."""

import argparse
import curses
import logging
import os
import sys
from typing import List, Optional

from .models import AppInfo, ChecklistError, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from .storage import checklist_dir, ensure_dir_exists, get_checklist, get_checklists

logger = logging.getLogger(__name__)

HELP_TEMPLATE = """
{name} {version}
{authors}

{name} presents the non-empty lines of a textfile to you one at a time
in a distraction-free TUI.

USAGE:

    {name}               List available checklists
    {name} <checklist>   Start presenting the given checklist
    {name} -l
    {name} --list
    {name} -h            Print this help message
    {name} --help
    {name} -d            Print the full path of the directory where checklists are stored
    {name} --directory
    {name} --init        Create the checklists directory
    {name} -v            Print the version
    {name} --version

KEYS:

    Space/Enter   Next step
    q             Quit
"""


def render_help(info: AppInfo) -> str:
    """Help text for the given package metadata."""
    return HELP_TEMPLATE.format(
        name=info.name, version=info.version, authors=info.authors
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr at the configured level."""
    level = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports bad usage as a ChecklistError."""

    def error(self, message: str):
        raise ChecklistError(f"Invalid arguments: {message}")


def build_parser(info: AppInfo) -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = ArgumentParser(prog=info.name, add_help=False, allow_abbrev=False)
    group = p.add_mutually_exclusive_group()
    group.add_argument("-h", "--help", dest="cmd", action="store_const", const="help")
    group.add_argument("-v", "--version", dest="cmd", action="store_const", const="version")
    group.add_argument("-d", "--directory", dest="cmd", action="store_const", const="directory")
    group.add_argument("-l", "--list", dest="cmd", action="store_const", const="list")
    group.add_argument("--init", dest="cmd", action="store_const", const="init")
    p.add_argument("checklist", nargs="?")
    return p


def choose_command(argv: List[str], info: AppInfo) -> argparse.Namespace:
    """Parse argv into a namespace whose cmd is always set.

    At most one argument is accepted. Anything other than one of the options
    is a checklist name, even when it starts with a dash.
    """
    if len(argv) > 1:
        raise ChecklistError("Invalid arguments")
    try:
        args, extras = build_parser(info).parse_known_args(argv)
    except ChecklistError:
        # option letters glued to other text, e.g. "-lx"
        args, extras = argparse.Namespace(cmd=None, checklist=None), argv
    if extras:
        args.checklist = extras[0]
    if args.cmd is None:
        args.cmd = "list" if args.checklist is None else "present"
    return args


def print_help(info: AppInfo) -> None:
    print(render_help(info))


def print_version(info: AppInfo) -> None:
    print(info.version)


def print_directory() -> None:
    print(os.path.abspath(checklist_dir()))


def init_directory() -> None:
    print(os.path.abspath(ensure_dir_exists()))


def print_checklists() -> None:
    lists = get_checklists()
    if not lists:
        print("No checklists", file=sys.stderr)
        return
    for name in lists:
        print(name)


def present_checklist(name: str) -> None:
    """Load name and run the interactive presenter over its lines."""
    from .tui import present

    steps = get_checklist(name)
    logger.info("Presenting %s (%d steps)", name, len(steps))
    present(steps)


def main(argv: Optional[List[str]] = None, info: Optional[AppInfo] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    configure_logging()
    info = info or AppInfo.default()
    argv = sys.argv[1:] if argv is None else argv

    try:
        args = choose_command(argv, info)
        if args.cmd == "help":
            print_help(info)
        elif args.cmd == "version":
            print_version(info)
        elif args.cmd == "directory":
            print_directory()
        elif args.cmd == "init":
            init_directory()
        elif args.cmd == "list":
            print_checklists()
        else:
            present_checklist(args.checklist)
    except (ChecklistError, OSError, curses.error) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
