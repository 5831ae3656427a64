from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .helpers import LinkContext, get_build_property, init_context, pod_install

app = typer.Typer(
    help="Inspect the host app's Xcode project from a plugin install script.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    project_dir: Optional[Path] = typer.Option(
        None, "--project-dir", help="React Native app root (defaults to two levels above the plugin)."
    ),
    module_dir: Optional[Path] = typer.Option(
        None, "--module-dir", help="Plugin directory holding module JSON files (defaults to cwd)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log discovery details."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"project_dir": project_dir, "module_dir": module_dir}


def _load(ctx: typer.Context) -> LinkContext:
    return init_context(module_dir=ctx.obj["module_dir"], project_dir=ctx.obj["project_dir"])


@app.command()
def locate(ctx: typer.Context) -> None:
    """Print the Xcode project path relative to the app root."""
    link_ctx = _load(ctx)
    if link_ctx.xcode_project is None:
        typer.echo(f"No Xcode project found under {link_ctx.project_dir}", err=True)
        raise typer.Exit(code=1)
    typer.echo(link_ctx.xcode_project)


@app.command("build-setting")
def build_setting(ctx: typer.Context, name: str = typer.Argument(..., help="Build setting name.")) -> None:
    """Print a build setting from the first target's default configuration."""
    value = get_build_property(_load(ctx), name)
    if value is None:
        typer.echo(f"{name} is not set", err=True)
        raise typer.Exit(code=1)
    typer.echo(value)


@app.command()
def plist(ctx: typer.Context) -> None:
    """Print the app's Info.plist as JSON."""
    link_ctx = _load(ctx)
    if link_ctx.plist is None:
        typer.echo("Info.plist not found", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(link_ctx.plist, indent=2, sort_keys=True, default=str))


@app.command("pod-install")
def pod_install_command(ctx: typer.Context) -> None:
    """Run pod install in the app's ios folder (failures are ignored)."""
    pod_install(_load(ctx))


if __name__ == "__main__":
    app()
