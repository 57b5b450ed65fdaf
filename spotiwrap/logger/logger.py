import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(
    width=100,
    highlight=False,
    markup=False,
    soft_wrap=True,
    stderr=True,
)


def setup_logging(level: int = logging.INFO, *, force: bool = False) -> None:
    """Send log records through rich. Meant to be called once by the application, never on import."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=force,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
