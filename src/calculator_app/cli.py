import logging
from typing import Tuple

import click

from . import config
from .engine import CalculatorEngine


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.option(
    "--log-level", default=config.LOG_LEVEL, show_default=True, help="Logging level"
)
def main(log_level: str) -> None:
    """Button-driven calculator."""
    setup_logging(log_level)


@main.command()
@click.argument("buttons", nargs=-1, required=True)
@click.option("--quiet", is_flag=True, default=False, help="Print only the final display")
def press(buttons: Tuple[str, ...], quiet: bool) -> None:
    """Press BUTTONS in order, e.g. `press 2 add 3 equals`."""
    engine = CalculatorEngine()
    display = engine.display
    for button in buttons:
        display = engine.press(button)
        if not quiet:
            click.echo(f"{button:>12}  {display}")
    if quiet:
        click.echo(display)


@main.command()
@click.option("--host", default=config.HOST, show_default=True, help="Host to bind to")
@click.option("--port", default=config.PORT, show_default=True, type=int, help="Port to bind to")
def serve(host: str, port: int) -> None:
    """Run the calculator web server."""
    from .app import app

    click.echo(f"Access at: http://{host}:{port}")
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":  # pragma: no cover
    main()
