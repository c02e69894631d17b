"""
Command-line interface for axon-jsx.

Runs the attribute transform over files or directory trees, either printing
the result, rewriting files in place, or checking that nothing is left to wrap.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from axon_jsx.config import DEFAULT_IMPORT_SOURCE, PluginConfig
from axon_jsx.transform import transform

cli = typer.Typer(
	name="axon-jsx",
	help="Wrap reactive JSX attribute expressions in thunks for axon",
	no_args_is_help=True,
)

SKIPPED_DIRS = frozenset({"node_modules", ".git"})


def collect_files(paths: Sequence[Path], config: PluginConfig) -> Iterator[Path]:
	"""Explicit files as given; directories searched for JSX files."""
	for path in paths:
		if not path.is_dir():
			yield path
			continue
		for candidate in sorted(path.rglob("*")):
			if SKIPPED_DIRS.intersection(candidate.relative_to(path).parts):
				continue
			if candidate.is_file() and config.handles(candidate.name):
				yield candidate


def _configure_logging(verbose: bool, console: Console) -> None:
	if not verbose:
		return
	logging.basicConfig(
		level=logging.DEBUG,
		format="%(message)s",
		handlers=[RichHandler(console=console, show_path=False)],
	)


@cli.command("transform")
def transform_cmd(
	paths: list[Path] = typer.Argument(..., help="Files or directories to transform"),
	write: bool = typer.Option(False, "--write", "-w", help="Rewrite files in place"),
	source_map: bool = typer.Option(
		False, "--source-map", help="Write <file>.map next to rewritten files"
	),
	check: bool = typer.Option(
		False, "--check", help="Exit with 1 if any file would be rewritten"
	),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
	"""Transform .jsx/.tsx files."""
	console = Console(stderr=True)
	_configure_logging(verbose, console)

	if write and check:
		typer.echo("❌ Please specify only one of --write or --check.")
		raise typer.Exit(1)
	if source_map and not write:
		typer.echo("❌ --source-map requires --write.")
		raise typer.Exit(1)

	config = PluginConfig()
	files = list(collect_files(paths, config))
	if not files:
		console.log("No JSX files found")
		return

	failures = 0
	changed = 0
	for path in files:
		try:
			code = path.read_bytes().decode("utf-8")
		except (OSError, UnicodeDecodeError) as exc:
			console.log(f"❌ {path}: {exc}")
			failures += 1
			continue

		result = transform(code, str(path), config=config)
		if result is None:
			console.log(f"[dim]unchanged[/dim] {path}")
			continue

		changed += 1
		count = len(result.wrapped)
		if check:
			console.log(f"[yellow]would rewrite[/yellow] {path} ({count} attribute(s))")
		elif write:
			path.write_bytes(result.code.encode("utf-8"))
			if source_map:
				map_path = path.with_name(path.name + ".map")
				map_path.write_text(result.map.to_json())
			console.log(f"✏️  {path} ({count} attribute(s))")
		else:
			if len(files) > 1:
				console.rule(str(path))
			typer.echo(result.code, nl=False)

	console.log(f"{changed} of {len(files)} file(s) {'need' if check else 'with'} changes")
	if failures or (check and changed):
		raise typer.Exit(1)


@cli.command("config")
def config_cmd(
	factory: str = typer.Option("h", "--factory", help="JSX factory function"),
	fragment: str = typer.Option("Fragment", "--fragment", help="JSX fragment symbol"),
	import_source: str = typer.Option(
		DEFAULT_IMPORT_SOURCE, "--import-source", help="Module providing the factory"
	),
):
	"""Print the esbuild JSX options the plugin injects."""
	config = PluginConfig(
		jsx_factory=factory, jsx_fragment=fragment, jsx_import_source=import_source
	)
	typer.echo(json.dumps(config.esbuild_options(), indent=2))


def main():
	"""Main CLI entry point."""
	cli()


if __name__ == "__main__":
	main()
