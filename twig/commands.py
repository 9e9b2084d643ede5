from typing import Callable
from .engine import Engine
from .errors import TwigError


def map_command(command: str) -> Callable:
    commandsMap = {
        "write": write,
        "add": add,
        "status": status,
        "commit": commit,
        "checkout": checkout,
        "branch": branch,
        "log": log,
        "reset": reset,
    }
    if command not in commandsMap:
        raise TwigError(f"Unknown command: {command}")
    return commandsMap[command]


def write(engine: Engine, args):
    engine.add_file_to_working_directory(args.path, args.content)
    print(f"Wrote {args.path} to the working directory.")


def add(engine: Engine, args):
    for path in engine.add(args.filepattern):
        print(f"Added {path} to staging.")


def status(engine: Engine, args):
    result = engine.status()
    print(result.head.describe())
    if not result.files:
        print("Nothing to show, working directory is empty.")
        return
    for file_status in result.files:
        labels = []
        if file_status.untracked:
            labels.append("untracked")
        if file_status.staged:
            labels.append("staged")
        if file_status.modified:
            labels.append("modified")
        print(f" - {file_status.path}: {' '.join(labels) or 'committed'}")


def commit(engine: Engine, args):
    commit_id = engine.commit(args.message)
    print(f"Committed changes as commit {commit_id}")


def checkout(engine: Engine, args):
    if args.create:
        engine.create_branch(args.name)
    engine.checkout_branch(args.name)
    print(f"Switched to branch '{args.name}'")


def branch(engine: Engine, args):
    if args.name:
        engine.create_branch(args.name)
        print(f"Created branch '{args.name}'")
        return
    current_branch = engine.current_branch()
    for branch_info in engine.list_branches():
        prefix = "*" if branch_info.name == current_branch else " "
        print(f"{prefix} {branch_info.name}")


def log(engine: Engine, args):
    for entry in engine.log():
        print(f"Commit: {entry.id}")
        print(f"Date: {entry.timestamp.ctime()}")
        print(f"\n    {entry.message}\n")


def reset(engine: Engine, args):
    engine.reset(args.commit)
    print(f"HEAD is now at {args.commit}")
