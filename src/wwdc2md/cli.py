"""Command-line interface for wwdc2md."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.converter import Converter
from .errors import Wwdc2mdError
from .logging_config import setup_logging
from .models.config import ContentType, Wwdc2mdConfig


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="wwdc2md",
        description="Convert WWDC session videos and Apple reference pages to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a session video page (code samples, resources, transcript)
  wwdc2md https://developer.apple.com/videos/play/wwdc2024/10149/

  # Convert a JavaScript-rendered reference page
  wwdc2md https://developer.apple.com/documentation/swiftui --content-type document

  # Watch the browser while it renders
  wwdc2md https://developer.apple.com/documentation/swiftui -c document --headed

  # Preview the Markdown without writing a file
  wwdc2md https://developer.apple.com/videos/play/wwdc2024/10149/ --dry-run
        """,
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="URL of the WWDC content",
    )

    parser.add_argument(
        "--content-type",
        "-c",
        choices=[content_type.value for content_type in ContentType],
        default=None,
        help="Type of content to parse (default: video)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="YAML config file (command-line options take precedence)",
    )

    # Output
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Directory for the Markdown file (default: current directory)",
    )

    # Network settings
    network_group = parser.add_argument_group("network settings")
    network_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="HTTP read timeout for video pages (default: 30)",
    )
    network_group.add_argument(
        "--user-agent",
        type=str,
        help="Custom User-Agent string",
    )

    # Browser settings
    browser_group = parser.add_argument_group("browser settings")
    browser_group.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window while rendering document pages",
    )
    browser_group.add_argument(
        "--wait-timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Seconds to wait for a document page to render (default: 30)",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the Markdown instead of writing a file",
    )
    output_group.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: WARNING)",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output (equivalent to --log-level DEBUG)",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only report errors",
    )
    output_group.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to log file (default: console only)",
    )

    return parser


def get_config(args: argparse.Namespace) -> Wwdc2mdConfig:
    """
    Build configuration from an optional config file and command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Wwdc2mdConfig instance
    """
    if args.config:
        config = Wwdc2mdConfig.from_yaml_file(args.config)
    else:
        config = Wwdc2mdConfig()

    data = config.model_dump()

    if args.url:
        data["url"] = args.url
    if args.content_type is not None:
        data["content_type"] = args.content_type
    if args.dry_run:
        data["dry_run"] = True
    if args.log_file is not None:
        data["log_file"] = args.log_file

    if args.verbose:
        data["log_level"] = "DEBUG"
    elif args.quiet:
        data["log_level"] = "ERROR"
    elif args.log_level is not None:
        data["log_level"] = args.log_level

    if args.timeout is not None:
        data["network"]["read_timeout"] = args.timeout
    if args.user_agent:
        data["network"]["user_agent"] = args.user_agent

    if args.headed:
        data["browser"]["headless"] = False
    if args.wait_timeout is not None:
        data["browser"]["wait_timeout"] = args.wait_timeout

    if args.output_dir is not None:
        data["output"]["directory"] = args.output_dir

    # Command-line values go through the same field validation as the file
    return Wwdc2mdConfig.model_validate(data)


def run_converter(config: Wwdc2mdConfig, console: Console, err_console: Console) -> int:
    """
    Run one conversion and report the result.

    Args:
        config: Validated configuration with a URL
        console: Console for normal output
        err_console: Console writing to stderr

    Returns:
        Exit code (0 for success, 1 for error)
    """
    logger = setup_logging(level=config.log_level, log_file=config.log_file, force=True)
    logger.debug(f"Converting {config.url} as {config.content_type.value}")

    try:
        result = Converter(config).convert()
    except Wwdc2mdError as e:
        logger.debug("Conversion failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    if result.written:
        console.print(f"Generated markdown file: {escape(result.filename)}", soft_wrap=True, highlight=False)
    else:
        console.print(result.markdown, markup=False, emoji=False, soft_wrap=True, highlight=False)
        err_console.print(f"[yellow]Dry run:[/yellow] would write {escape(str(result.path))}", soft_wrap=True)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)

    try:
        config = get_config(args)
    except Exception as e:
        err_console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    if not config.url:
        err_console.print("[red]Error:[/red] Please provide a URL to convert")
        return 1

    return run_converter(config, console, err_console)


if __name__ == "__main__":
    sys.exit(main())
