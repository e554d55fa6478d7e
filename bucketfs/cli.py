"""bucketfs command line: list, read and write objects as files."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from typing import Any, BinaryIO

from rich.console import Console
from rich.table import Table

from bucketfs.errors import NotFound
from bucketfs.filesystem import ObjectFileSystem
from config.loader import load_config

COPY_CHUNK_SIZE = 64 * 1024


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bucketfs", description="Filesystem view over a flat object store")
    p.add_argument("--root", default=None, help="Key prefix to scope all paths under")
    p.add_argument("--strategy", choices=["memory", "sqlite", "gcs"], default=None, help="Object store provider")
    p.add_argument("--workspace", default=None, help="Project directory holding .bucketfs/config.*")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = p.add_subparsers(dest="command", required=True)
    ls = sub.add_parser("ls", help="List a directory")
    ls.add_argument("dir", nargs="?", default="")
    cat = sub.add_parser("cat", help="Write a file to stdout")
    cat.add_argument("name")
    put = sub.add_parser("put", help="Replace a file with stdin")
    put.add_argument("name")
    app = sub.add_parser("append", help="Append stdin to a file")
    app.add_argument("name")
    return p


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.root is not None:
        overrides["root_prefix"] = args.root
    if args.strategy is not None:
        overrides["storage"] = {"strategy": args.strategy}
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def cmd_ls(fs: ObjectFileSystem, args: argparse.Namespace, console: Console) -> None:
    entries = fs.read_dir(args.dir)
    key = fs.key(args.dir)
    table = Table(title=key if key.startswith("/") else f"/{key}")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    for entry in entries:
        table.add_row(entry.name, "dir" if entry.is_dir else "file")
    console.print(table)


def cmd_cat(fs: ObjectFileSystem, args: argparse.Namespace, stdout: BinaryIO) -> None:
    with fs.open(args.name) as f:
        shutil.copyfileobj(f, stdout, COPY_CHUNK_SIZE)
    stdout.flush()


def cmd_write(fs: ObjectFileSystem, args: argparse.Namespace, stdin: BinaryIO) -> None:
    writer = fs.append(args.name) if args.command == "append" else fs.create(args.name)
    try:
        shutil.copyfileobj(stdin, writer, COPY_CHUNK_SIZE)
    except Exception:
        writer.abort()
        raise
    writer.close()


def main(
    argv: list[str] | None = None,
    *,
    fs: ObjectFileSystem | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    console: Console | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = load_config(workspace_root=args.workspace, cli_overrides=_overrides(args))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = console or Console()
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout.buffer

    if fs is None:
        fs = ObjectFileSystem.from_settings(settings)
    try:
        if args.command == "ls":
            cmd_ls(fs, args, console)
        elif args.command == "cat":
            cmd_cat(fs, args, stdout)
        else:
            cmd_write(fs, args, stdin)
    except NotFound as e:
        console.print(str(e), style="red", markup=False)
        return 1
    finally:
        fs.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
