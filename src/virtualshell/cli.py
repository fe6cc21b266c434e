"""
Interactive REPL for the virtual shell.

Reads command lines, hands them to the command engine and prints the
messages it returns, until 'exit' or end of input.
"""

import argparse
import logging
import sys
from collections.abc import Callable

from attrs import evolve

from virtualshell.commands.engine import CommandEngine
from virtualshell.config import ShellConfig
from virtualshell.core.types import CommandOutcome
from virtualshell.exceptions import ConfigurationError
from virtualshell.log_config import LoggingConfig, configure_logging

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"

BANNER_LINES = [
    "*********  Welcome to the virtual linux application  *********",
    "",
    "Below commands are supported till now:",
    "",
    "1. mkdir",
    "2. ls",
    "3. pwd",
    "4. rm",
    "5. cd",
    "6. session clear",
    "7. exit",
    "",
]

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="virtualshell",
        description="Interactive in-memory virtual filesystem shell.",
    )
    parser.add_argument("--root-label", help="label of the root directory (default: /)")
    parser.add_argument("--prompt", help="prompt template, '{cwd}' is the working directory")
    parser.add_argument("--no-banner", action="store_true", help="skip the welcome banner")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="diagnostic log level written to stderr",
    )
    parser.add_argument("--debug", action="store_true", help="shortcut for --log-level DEBUG")
    return parser


def config_from_args(args: argparse.Namespace, base: ShellConfig) -> ShellConfig:
    """Overlay command line options on a base configuration."""
    overrides = {}
    if args.root_label is not None:
        overrides["root_label"] = args.root_label
    if args.prompt is not None:
        overrides["prompt"] = args.prompt
    if args.no_banner:
        overrides["show_banner"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"
    elif args.log_level is not None:
        overrides["log_level"] = args.log_level
    return evolve(base, **overrides)


def render(outcome: CommandOutcome, write: Write) -> None:
    for message in outcome.messages:
        write(message.text)


def is_exit(line: str) -> bool:
    return line.strip().lower() == EXIT_COMMAND


def run_repl(engine: CommandEngine, read_line: ReadLine, write: Write) -> int:
    """
    Drive the read-execute-print loop.

    Params:
        engine: Command engine holding the session state
        read_line: Called with the prompt, returns the next line or raises EOFError
        write: Called with each line of output

    Returns:
        Process exit code
    """
    while True:
        try:
            line = read_line(engine.config.render_prompt(engine.cwd))
        except EOFError:
            logger.debug("End of input, leaving the shell")
            return 0

        if is_exit(line):
            return 0
        if not line.strip():
            continue

        render(engine.execute(line), write)


def main(argv: list[str] | None = None) -> int:
    """
    Run the virtual shell.

    Params:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Process exit code (0 on exit, 2 on bad configuration, 130 on interrupt)
    """
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args, ShellConfig.from_env())
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    configure_logging(LoggingConfig(level=config.log_level))
    logger.debug("Starting shell with %s", config)

    if config.show_banner:
        for line in BANNER_LINES:
            print(line)

    engine = CommandEngine(config)
    try:
        return run_repl(engine, input, print)
    except KeyboardInterrupt:
        print()
        return 130
