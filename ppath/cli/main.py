import argparse
import sys
from pathlib import Path as FsPath
from typing import List, Optional

from ppath.core.errors import PathError
from ppath.core.logger import configure_logging, get_logger, log
from ppath.core.path import Path
from ppath.core.settings import load_settings, resolve_dir_mode, resolve_log_level


# ----------------------------
# Parser
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppath",
        description="Move, copy and inspect filesystem paths.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log every filesystem step",
    )
    parser.add_argument(
        "--settings",
        type=FsPath,
        default=None,
        help="settings JSON file (default: $PPATH_SETTINGS or ./.ppath.json)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    mv = sub.add_parser("mv", help="move SRC into DST, merging directories")
    mv.add_argument("src")
    mv.add_argument("dst")

    cp = sub.add_parser("cp", help="copy SRC to DST")
    cp.add_argument("src")
    cp.add_argument("dst")

    info = sub.add_parser("info", help="show kind, size and digest of PATH")
    info.add_argument("path")

    return parser


# ----------------------------
# Commands
# ----------------------------

def _describe(p: Path) -> str:
    if p.is_symlink():
        kind = "symlink"
    elif p.is_dir():
        kind = "directory"
    elif p.is_regular():
        kind = "file"
    elif p.is_dev():
        kind = "device"
    else:
        kind = "other"

    lines = [f"path: {p}", f"kind: {kind}", f"size: {p.size_or_zero()}"]
    if p.is_regular():
        lines.append(f"sha256: {p.digest()}")
    return "\n".join(lines)


def run(argv: Optional[List[str]] = None, *, cwd: FsPath) -> int:
    """
    Run the CLI. Relative arguments resolve against cwd.

    Returns the process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(FsPath(cwd), args.settings)
        dir_mode = resolve_dir_mode(settings)
        level = resolve_log_level(settings)
    except (RuntimeError, ValueError) as e:
        print(f"ppath: {e}", file=sys.stderr)
        return 2

    handler = configure_logging("DEBUG" if args.verbose else level)

    try:
        if args.command == "info":
            target = Path(args.path).abs(cwd)
            if not target.exists():
                print(f"ppath: {target}: does not exist", file=sys.stderr)
                return 1
            print(_describe(target))
            return 0

        src = Path(args.src).abs(cwd)
        dst = Path(args.dst).abs(cwd)

        if args.command == "mv":
            src.merge_move(dst, dir_mode=dir_mode)
            log("INFO", "cli", f"moved {src} -> {dst}")
        else:
            landed = src.copy(dst, dir_mode=dir_mode)
            log("INFO", "cli", f"copied {src} -> {landed}")
        return 0

    except (PathError, OSError) as e:
        print(f"ppath: {e}", file=sys.stderr)
        return 1
    finally:
        get_logger().removeHandler(handler)
