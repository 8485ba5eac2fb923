"""Registry commands: list, add, remove, sync."""

from typing import Annotated

import typer

from alts.api.config.AltsConfig import AltsConfig
from alts.api.registry.cmd_add import cmd_add
from alts.api.registry.cmd_list import cmd_list
from alts.api.registry.cmd_remove import cmd_remove
from alts.api.registry.cmd_sync import cmd_sync

from ._handle_stage_result import _handle_stage_result


def _config(ctx: typer.Context) -> AltsConfig:
    return ctx.find_root().obj["config"]


def registry_commands(app: typer.Typer) -> None:
    """Register the registry commands on ``app``."""

    @app.command(name="list")
    def list_cmd(
        ctx: typer.Context,
        name: Annotated[str, typer.Option("--name", "-n", help="Link name to query")],
    ) -> None:
        """List alternatives for a link name."""
        _handle_stage_result(cmd_list)(name, config=_config(ctx))

    @app.command(name="add")
    def add_cmd(
        ctx: typer.Context,
        target: Annotated[str, typer.Option("--target", "-t", help="Target the link may point at")],
        name: Annotated[str, typer.Option("--name", "-n", help="Link name")],
        weight: Annotated[int, typer.Option("--weight", "-w", help="Priority; higher wins")],
    ) -> None:
        """Add an alternative, or update the weight of an existing one."""
        _handle_stage_result(cmd_add)(name, target, weight, config=_config(ctx))

    @app.command(name="remove")
    def remove_cmd(
        ctx: typer.Context,
        target: Annotated[str, typer.Option("--target", "-t", help="Target to remove")],
        name: Annotated[str, typer.Option("--name", "-n", help="Link name")],
    ) -> None:
        """Remove an alternative."""
        _handle_stage_result(cmd_remove)(name, target, config=_config(ctx))

    @app.command(name="sync")
    def sync_cmd(ctx: typer.Context) -> None:
        """Point every link at its highest-priority alternative."""
        _handle_stage_result(cmd_sync)(config=_config(ctx))
