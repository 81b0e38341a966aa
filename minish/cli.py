import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from minish import __version__
from minish.config.settings import Settings
from minish.container import DependencyContainer
from minish.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(settings: Settings) -> None:
    # stdout belongs to the shell session; logs go to stderr or a file.
    if settings.log_file:
        logging.basicConfig(
            level=settings.log_level_number,
            format=LOG_FORMAT,
            filename=settings.log_file,
        )
    else:
        logging.basicConfig(
            level=settings.log_level_number, format=LOG_FORMAT, stream=sys.stderr
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minish",
        description="Interactive command interpreter with a handful of builtins.",
    )
    parser.add_argument(
        "--prompt", default=None, help="Prompt string (default: '$ ' or MINISH_PROMPT)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
    )
    parser.add_argument(
        "--log-file", default=None, help="Write logs to this file instead of stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings(
            prompt=args.prompt, log_level=args.log_level, log_file=args.log_file
        )
    except ConfigurationError as e:
        errors = Console(stderr=True)
        errors.print(f"[bold red]minish:[/bold red] {escape(str(e))}", soft_wrap=True)
        return 2

    _configure_logging(settings)

    container = DependencyContainer(settings=settings)
    return container.get_interactive_session_use_case().execute()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
