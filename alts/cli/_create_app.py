"""Create the main Typer CLI app."""

from typing import Annotated

import typer

from alts.api.config.AltsConfig import AltsConfig
from alts.api.config.get_home_dir import get_home_dir
from alts.utils.configure_logging import configure_logging
from alts.utils.get_package_version import get_package_version

from .registry import registry_commands


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"alts {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Manage alternatives: symlinks resolved to the highest-priority target",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    registry_commands(app)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: Annotated[str, typer.Option("--display", "-d", help="Output format: json or yaml")] = "yaml",
        registry_dir: Annotated[
            str | None, typer.Option("--registry-dir", help="Directory holding <name>.json records")
        ] = None,
        link_dir: Annotated[str | None, typer.Option("--link-dir", help="Directory for new links")] = None,
        version: Annotated[
            bool,
            typer.Option("--version", "-v", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = False,
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            config = AltsConfig.load().with_overrides(registry_dir=registry_dir, link_dir=link_dir)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        configure_logging(get_home_dir(), config.log.file, config.log.level)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["config"] = config

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
