"""Command-line interface definition and argument parsing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

__all__ = [
    "CommandKind",
    "BuildArgs",
    "Cli",
    "DEFAULT_CONFIG",
    "build_parser",
    "parse_args",
]

_VERSION = "0.6.5"

DEFAULT_CONFIG = Path("tola.toml")
"""Config file name used when none is given."""


class CommandKind(Enum):
    """The available subcommands."""

    INIT = "init"
    BUILD = "build"
    SERVE = "serve"
    DEPLOY = "deploy"


@dataclass(frozen=True)
class BuildArgs:
    """Arguments shared by the build and serve commands."""

    clean: bool = False
    minify: bool | None = None
    tailwind: bool | None = None
    rss: bool | None = None
    sitemap: bool | None = None
    base_url: str | None = None


@dataclass(frozen=True)
class Cli:
    """Parsed command line."""

    command: CommandKind
    output: Path | None = None
    content: Path | None = None
    assets: Path | None = None
    config: Path = DEFAULT_CONFIG
    build_args: BuildArgs | None = None
    name: Path | None = None
    interface: str | None = None
    port: int | None = None
    watch: bool | None = None
    force: bool | None = None
    _unused: None = field(default=None, repr=False, compare=False)

    def is_init(self) -> bool:
        return self.command is CommandKind.INIT

    def is_build(self) -> bool:
        return self.command is CommandKind.BUILD

    def is_serve(self) -> bool:
        return self.command is CommandKind.SERVE

    def is_deploy(self) -> bool:
        return self.command is CommandKind.DEPLOY


def _bool_value(text: str) -> bool:
    match text:
        case "true":
            return True
        case "false":
            return False
        case _:
            raise argparse.ArgumentTypeError(
                f"invalid value '{text}': expected 'true' or 'false'"
            )


def _port_value(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port '{text}'") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port {port} is not in 0..=65535")
    return port


def _add_flag(parser: argparse.ArgumentParser, *names: str, help: str) -> None:
    """Add an option that may be given bare (meaning true) or with true/false."""
    parser.add_argument(
        *names,
        nargs="?",
        const=True,
        default=None,
        type=_bool_value,
        metavar="BOOL",
        help=help,
    )


def _add_build_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Clean output directory completely before building",
    )
    _add_flag(parser, "-m", "--minify", help="Minify the html content")
    _add_flag(parser, "-t", "--tailwind", help="enable tailwindcss support")
    _add_flag(parser, "--rss", help="enable rss feed generation")
    _add_flag(parser, "--sitemap", help="enable sitemap generation")
    parser.add_argument(
        "--base-url",
        dest="base_url",
        default=None,
        help="Override base URL for the site",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="tola",
        description="static site generator for typst-based blog",
    )
    parser.add_argument("-V", "--version", action="version", version=f"tola {_VERSION}")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output directory path (relative to project root)",
    )
    parser.add_argument(
        "-c", "--content", type=Path, default=None,
        help="Content directory path (relative to project root)",
    )
    parser.add_argument(
        "-a", "--assets", type=Path, default=None,
        help="Assets directory path (relative to project root)",
    )
    parser.add_argument(
        "-C", "--config", type=Path, default=DEFAULT_CONFIG,
        help="Config file name (default: tola.toml)",
    )

    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    init = sub.add_parser("init", aliases=["i"], help="Init a template site")
    init.add_argument(
        "name", nargs="?", type=Path, default=None,
        help="the name(path) of site directory, related to `root`",
    )
    init.set_defaults(kind=CommandKind.INIT)

    build = sub.add_parser(
        "build", aliases=["b"],
        help="Deletes the output directory if there is one and rebuilds the site",
    )
    _add_build_args(build)
    build.set_defaults(kind=CommandKind.BUILD)

    serve = sub.add_parser(
        "serve", aliases=["s"],
        help="Serve the site. Rebuild and reload on change automatically",
    )
    _add_build_args(serve)
    serve.add_argument("-i", "--interface", default=None, help="Interface to bind on")
    serve.add_argument("-p", "--port", type=_port_value, default=None, help="The port to listen on")
    _add_flag(serve, "-w", "--watch", help="enable watch")
    serve.set_defaults(kind=CommandKind.SERVE)

    deploy = sub.add_parser(
        "deploy", aliases=["d"],
        help="Deletes the output directory if there is one and rebuilds the site",
    )
    _add_flag(deploy, "-f", "--force", help="force deployment")
    deploy.set_defaults(kind=CommandKind.DEPLOY)

    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse the command line; exits with status 2 on invalid or missing arguments."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not args_list:
        parser.print_help(sys.stderr)
        raise SystemExit(2)

    ns = parser.parse_args(args_list)
    kind: CommandKind = ns.kind

    build_args = None
    if kind in (CommandKind.BUILD, CommandKind.SERVE):
        build_args = BuildArgs(
            clean=ns.clean,
            minify=ns.minify,
            tailwind=ns.tailwind,
            rss=ns.rss,
            sitemap=ns.sitemap,
            base_url=ns.base_url,
        )

    return Cli(
        command=kind,
        output=ns.output,
        content=ns.content,
        assets=ns.assets,
        config=ns.config,
        build_args=build_args,
        name=getattr(ns, "name", None),
        interface=getattr(ns, "interface", None),
        port=getattr(ns, "port", None),
        watch=getattr(ns, "watch", None),
        force=getattr(ns, "force", None),
    )