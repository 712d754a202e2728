"""
Command-line interface for preboot.
Prints the inline code to embed in server rendered pages.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from preboot.env import env
from preboot.errors import ConfigurationError
from preboot.inline import (
	get_inline_code,
	get_inline_definition,
	get_inline_invocation,
)

logger = logging.getLogger(__name__)

cli = typer.Typer(
	name="preboot",
	help="Generate inline code that records user events until the client app takes over",
	no_args_is_help=True,
)

APP_ROOT_OPTION = typer.Option(
	None,
	"--app-root",
	"-r",
	help="Selector of the app root element. Defaults to $PREBOOT_APP_ROOT.",
)
CONFIG_OPTION = typer.Option(
	None,
	"--config",
	"-c",
	help="JSON file with preboot options (camelCase keys, as in the browser)",
	exists=True,
	dir_okay=False,
)
OUTPUT_OPTION = typer.Option(
	None, "--output", "-o", help="Write the code to this file instead of stdout"
)


def _load_overrides(config: Path | None, app_root: str | None) -> dict[str, Any]:
	overrides: dict[str, Any] = {}
	if config is not None:
		try:
			loaded = json.loads(config.read_text())
		except json.JSONDecodeError as exc:
			raise typer.BadParameter(
				f"{config} is not valid JSON: {exc}", param_hint="--config"
			) from None
		if not isinstance(loaded, dict):
			raise typer.BadParameter(
				f"{config} must contain a JSON object", param_hint="--config"
			)
		overrides.update(loaded)
		logger.debug("Loaded preboot options from %s", config)

	app_root = app_root or env.app_root
	if app_root:
		overrides["appRoot"] = app_root
	return overrides


def _emit(
	generate: Callable[[dict[str, Any]], str],
	config: Path | None,
	app_root: str | None,
	output: Path | None,
) -> None:
	logging.basicConfig(level=env.log_level)
	console = Console(stderr=True)
	try:
		code = generate(_load_overrides(config, app_root))
	except (typer.BadParameter, ConfigurationError) as exc:
		console.print(f"❌ {exc}")
		raise typer.Exit(1) from None

	if output is None:
		typer.echo(code)
		return
	output.parent.mkdir(parents=True, exist_ok=True)
	output.write_text(code + "\n")
	console.print(f"✅ Wrote {output}")


@cli.command("definition")
def definition(
	app_root: str | None = APP_ROOT_OPTION,
	config: Path | None = CONFIG_OPTION,
	output: Path | None = OUTPUT_OPTION,
):
	"""Print the prebootInitFn definition (once per page)."""
	_emit(get_inline_definition, config, app_root, output)


@cli.command("invocation")
def invocation(
	app_root: str | None = APP_ROOT_OPTION,
	config: Path | None = CONFIG_OPTION,
	output: Path | None = OUTPUT_OPTION,
):
	"""Print the prebootInitFn call for one app root."""
	_emit(get_inline_invocation, config, app_root, output)


@cli.command("inline")
def inline(
	app_root: str | None = APP_ROOT_OPTION,
	config: Path | None = CONFIG_OPTION,
	output: Path | None = OUTPUT_OPTION,
):
	"""Print definition and invocation as one block (single app root pages)."""
	_emit(get_inline_code, config, app_root, output)


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except Exception:
		console = Console()
		console.print_exception()
		raise typer.Exit(1) from None


if __name__ == "__main__":
	main()
