"""CLI entry point for Capture Config."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .capture import CaptureConfig, Flag, Mode, ModuleDescriptor, apply_defaults
from .core.config import Settings, get_settings, set_settings
from .core.exceptions import CaptureConfigError
from .core.utils import configure_logging, parse_int, parse_variable

console = Console()


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def format_flags(flags: int) -> str:
    """Render a flag bitmask with known flag names."""
    names = [flag.name for flag in Flag if flags & flag]
    if names:
        return f"{flags:#x} ({', '.join(names)})"
    return f"{flags:#x}"


@click.group()
@click.version_option(version=__version__, prog_name="captureconfig")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (JSON)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Capture Config - build and inspect capture module configurations."""
    ctx.ensure_object(dict)
    try:
        if settings_path is not None:
            set_settings(Settings.from_file(settings_path))
        settings = get_settings()
    except CaptureConfigError as e:
        print_error(str(e))
        sys.exit(1)
    settings.verbose = settings.verbose or verbose
    configure_logging(settings.verbose)
    ctx.obj["settings"] = settings


@main.command()
@click.option("--module", "-m", "module_name", required=True, help="Capture module name")
@click.option("--input", "-i", "input_", help="Interface(s) or file to open")
@click.option("--snaplen", "-s", type=int, help="Maximum packet capture length")
@click.option("--timeout", "-t", type=click.IntRange(min=0), help="Read timeout in milliseconds (0 = unlimited)")
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in Mode]),
    help="Module mode",
)
@click.option("--flag", "-f", "flags", multiple=True, help="Flag bit to set (e.g. 0x1); repeatable")
@click.option("--var", "variables", multiple=True, help="Module variable KEY[=VALUE]; repeatable")
@click.option("--defaults", is_flag=True, help="Start from the settings file defaults")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.option("--output", "-o", type=click.Path(), help="Output file (JSON)")
@click.pass_context
def show(
    ctx: click.Context,
    module_name: str,
    input_: str | None,
    snaplen: int | None,
    timeout: int | None,
    mode: str | None,
    flags: tuple[str, ...],
    variables: tuple[str, ...],
    defaults: bool,
    as_json: bool,
    output: str | None,
) -> None:
    """Build a capture configuration and display it."""
    module = ModuleDescriptor(name=module_name)

    try:
        with CaptureConfig.create(module) as cfg:
            if defaults:
                apply_defaults(cfg, ctx.obj["settings"])
            if input_ is not None:
                cfg.set_input(input_)
            if snaplen is not None:
                cfg.set_snaplen(snaplen)
            if timeout is not None:
                cfg.set_timeout(timeout)
            if mode is not None:
                cfg.set_mode(Mode.parse(mode))
            for flag in flags:
                cfg.set_flag(parse_int(flag))
            for text in variables:
                key, value = parse_variable(text)
                cfg.set_variable(key, value)

            data = cfg.to_dict()
            rows = list(cfg.iter_variables())
    except CaptureConfigError as e:
        print_error(str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        table = Table(title=f"Capture Configuration ({module_name})")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Input", data["input"] or "-")
        table.add_row("Snaplen", str(data["snaplen"]))
        table.add_row("Timeout", f"{data['timeout']} ms" if data["timeout"] else "unlimited")
        table.add_row("Mode", data["mode"])
        table.add_row("Flags", format_flags(data["flags"]))
        console.print(table)

        if rows:
            var_table = Table(title=f"Variables ({len(rows)})")
            var_table.add_column("Key", style="cyan")
            var_table.add_column("Value", style="yellow")
            for key, value in rows:
                var_table.add_row(key, value if value is not None else "-")
            console.print(var_table)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(data, f, indent=2)
        print_success(f"Configuration saved to {output_path}")


@main.command()
@click.option("--save", type=click.Path(dir_okay=False, path_type=Path), help="Write settings to this file")
@click.pass_context
def settings(ctx: click.Context, save: Path | None) -> None:
    """Show the effective settings."""
    current: Settings = ctx.obj["settings"]

    table = Table(title="Settings")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("default_snaplen", str(current.default_snaplen))
    table.add_row("default_timeout", str(current.default_timeout))
    table.add_row("default_mode", current.default_mode)
    table.add_row("verbose", str(current.verbose))
    console.print(table)

    if save:
        current.save(save)
        print_success(f"Settings saved to {save}")


if __name__ == "__main__":
    main()
