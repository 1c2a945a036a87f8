"""css-sync CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from css_sync import __version__

# Value of a bare `--sort` (no file given): use the built-in spec.
_BUILTIN_SPEC = ":builtin:"


@click.group()
@click.version_option(version=__version__, prog_name="css-sync")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """css-sync - keep CSS modules sorted and in step with their components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(message)s" if verbose else "%(message)s",
    )


@cli.command("format")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--sort", "sort_path", type=click.Path(), default=None, help="Category spec JSON file")
@click.option("--check", is_flag=True, help="Report files that would change, write nothing")
@click.option("--no-headers", is_flag=True, help="Do not generate category header comments")
def format_command(files: tuple[str, ...], sort_path: str | None, check: bool, no_headers: bool) -> None:
    """Format CSS files, grouping declarations by category."""
    from css_sync.formatter import format_css
    from css_sync.parser import parse
    from css_sync.spec import load_spec_with_fallback

    spec = load_spec_with_fallback(sort_path)
    drift: list[str] = []

    for name in files:
        path = Path(name)
        css = path.read_text(encoding="utf-8")
        out = format_css(parse(css), spec, headers=not no_headers)
        if out == css:
            continue
        if check:
            drift.append(name)
            click.echo(f"Would reformat: {name}")
        else:
            path.write_text(out, encoding="utf-8")
            click.echo(f"Formatted: {name}")

    if drift:
        click.echo(f"{len(drift)} file(s) would be reformatted", err=True)
        sys.exit(1)


@cli.command()
@click.option("--dir", "dir_name", default="src", help="Source directory to scan")
@click.option("--gen", is_flag=True, help="Generate missing modules and styles imports")
@click.option(
    "--sort",
    "sort_path",
    is_flag=False,
    flag_value=_BUILTIN_SPEC,
    default=None,
    help="Sort declarations; optionally takes a category spec JSON file",
)
@click.option("--watch", is_flag=True, help="Keep watching for changes after the scan")
@click.option("-a", "--all", "all_modes", is_flag=True, help="Shorthand for --watch --gen --sort")
@click.option("--interval", default=0.5, type=float, help="Watch poll interval in seconds")
@click.option("--no-headers", is_flag=True, help="Do not generate category header comments")
def sync(
    dir_name: str,
    gen: bool,
    sort_path: str | None,
    watch: bool,
    all_modes: bool,
    interval: float,
    no_headers: bool,
) -> None:
    """Sync CSS modules with the classes their components use."""
    from css_sync.config import SyncConfig
    from css_sync.runner import SyncRunner

    config = SyncConfig.for_directory(
        Path.cwd(),
        dir_name,
        gen=gen or all_modes,
        sort=sort_path is not None or all_modes,
        sort_path=None if sort_path in (None, _BUILTIN_SPEC) else Path(sort_path),
        watch=watch or all_modes,
        headers=not no_headers,
        interval=interval,
    )

    runner = SyncRunner(config)
    click.echo(f"Mode: {'Watch' if config.watch else 'Scan'}")
    click.echo(f"Dir:  {config.target_dir}")
    click.echo(f"Gen:  {'Enabled' if config.gen else 'Disabled'}")
    click.echo(f"Sort: {'Enabled' if config.sort else 'Disabled'}")
    click.echo()

    try:
        results = runner.run()
    except KeyboardInterrupt:
        runner.stop()
        return

    click.echo(f"Synced {len(results)} component(s)")


@cli.command()
@click.option("--sort", "sort_path", type=click.Path(), default=None, help="Category spec JSON file")
def spec(sort_path: str | None) -> None:
    """Print the effective category spec as JSON."""
    from css_sync.spec import load_spec_with_fallback

    entries = load_spec_with_fallback(sort_path)
    click.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
