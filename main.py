import sys
from pathlib import Path
from typing import Iterable

import argparse
import logging
import shlex
from twig.commands import map_command
from twig.config import load_config
from twig.engine import InMemoryEngine
from twig.errors import TwigError
from twig.repo import Repo

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twig", description="Twig session command", exit_on_error=False)
    subparsers = parser.add_subparsers(dest="command", required=True)

    # write command
    write_parser = subparsers.add_parser("write", help="Write a file into the working directory")
    write_parser.add_argument("path", help="Path of the file")
    write_parser.add_argument("content", help="New content of the file")

    # add command
    add_parser = subparsers.add_parser("add", help="Add files to staging")
    add_parser.add_argument("filepattern", help="File path or regular expression to add")

    # status command
    subparsers.add_parser("status", help="Show the status of the repository")

    # commit command
    commit_parser = subparsers.add_parser("commit", help="Commit staged changes")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message")

    # checkout command
    checkout_parser = subparsers.add_parser("checkout", help="Switch to a branch")
    checkout_parser.add_argument("-b", "--create", action="store_true", help="Create the branch first")
    checkout_parser.add_argument("name", help="Branch name to switch to")

    # branch command
    branch_parser = subparsers.add_parser("branch", help="List branches, or create one")
    branch_parser.add_argument("name", nargs="?", help="Name of the branch to create")

    # log command
    subparsers.add_parser("log", help="Show commit logs")

    # reset command
    reset_parser = subparsers.add_parser("reset", help="Hard reset the current branch to a commit")
    reset_parser.add_argument("commit", help="Commit id to reset to")

    return parser


def run_session(engine: InMemoryEngine, lines: Iterable[str], stop_on_error: bool = False) -> int:
    """Run one twig command per line against ``engine``.

    Blank lines and ``#`` comments are skipped. Returns 1 if any command
    failed, 0 otherwise.
    """
    parser = build_parser()
    failed = False
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            args = parser.parse_args(shlex.split(line))
            map_command(args.command)(engine, args)
        except (TwigError, argparse.ArgumentError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            failed = True
        except SystemExit:
            # argparse already printed usage for a malformed line
            failed = True
        else:
            continue
        if stop_on_error:
            break
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    cli = argparse.ArgumentParser(description="Twig: an in-memory version control session.")
    cli.add_argument("script", nargs="?", type=Path, help="File of twig commands; reads stdin when omitted")
    cli.add_argument("--config", type=Path, default=None, help="INI config file")
    options = cli.parse_args(argv)

    config = load_config(options.config)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    engine = InMemoryEngine(Repo(config=config))

    if options.script is None:
        return run_session(engine, sys.stdin)
    if not options.script.is_file():
        print(f"error: script {options.script} does not exist", file=sys.stderr)
        return 1
    logger.debug("Running script %s", options.script)
    with options.script.open() as f:
        return run_session(engine, f, stop_on_error=True)


if __name__ == "__main__":
    sys.exit(main())
