"""
consolekit/cli.py

Command-line interface for previewing themes and trying the prompts.

Usage:
    consolekit demo
    consolekit --theme nord --symbols ascii demo
    consolekit parse-color "#abc"
    consolekit themes
    consolekit show-theme dracula --yaml
    consolekit ask
"""

import json
import logging
import sys

import click
import yaml

from .colors import try_parse_color
from .config import ConsoleSettings
from .console import Console, InputCancelled
from .symbols import SymbolSet
from .terminal import initialize
from .theme import registry

logger = logging.getLogger(__name__)


@click.group()
@click.option("--theme", "theme_name", default=None, help="Theme preset name (see 'themes')")
@click.option("--symbols", type=click.Choice([s.value for s in SymbolSet]), default=None,
              help="Glyph set (default: auto-detect)")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx, theme_name, symbols, verbose):
    """Themed console output and prompts."""
    settings = ConsoleSettings.from_env()
    if verbose:
        settings.log_level = "DEBUG"
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if theme_name is not None:
        if registry.get(theme_name) is None:
            raise click.BadParameter(f"Unknown theme '{theme_name}'", param_hint="--theme")
        settings.theme_name = theme_name
    if symbols is not None:
        settings.symbol_set = symbols

    initialize()
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console.from_settings(settings)


@cli.command("demo")
@click.pass_context
def demo(ctx):
    """Print every message kind and UI helper."""
    console: Console = ctx.obj["console"]

    console.section(f"consolekit · {console.theme.name}")
    console.print_success("Configuration saved")
    console.print_info("3 devices discovered")
    console.print_warning("Vault is locked")
    console.print_error("Connection refused")
    console.divider()
    for number, text in enumerate(["List devices", "Connect", "Settings", "Quit"], start=1):
        console.menu_item(number, text, pad_width=2)
    console.divider()
    console.print_result("Primary", str(console.theme.primary))
    console.show_item(42, "eng-leaf-1")


@cli.command("parse-color")
@click.argument("color")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def parse_color_cmd(ctx, color, output_json):
    """Parse a color string and print its channels."""
    console: Console = ctx.obj["console"]
    rgb = try_parse_color(color)

    if rgb is None:
        console.print_error(f"Invalid color: {color!r}")
        sys.exit(1)

    if output_json:
        click.echo(json.dumps({"r": rgb.r, "g": rgb.g, "b": rgb.b, "hex": rgb.to_hex()}))
    else:
        console.write_line("   ", bg=str(rgb))
        console.print_result("RGB", str(rgb))
        console.print_result("Hex", rgb.to_hex())


@cli.command("themes")
@click.pass_context
def list_themes(ctx):
    """List theme presets."""
    console: Console = ctx.obj["console"]
    names = registry.list_themes()
    width = len(str(len(names)))
    for number, name in enumerate(names, start=1):
        console.menu_item(number, name, pad_width=width)


@cli.command("show-theme")
@click.argument("name", required=False)
@click.option("--yaml", "output_yaml", is_flag=True, help="Output as YAML")
@click.pass_context
def show_theme(ctx, name, output_yaml):
    """Show the colors of a preset (default: the active theme)."""
    console: Console = ctx.obj["console"]

    if name is None:
        theme = console.theme
    else:
        theme = registry.get(name)
        if theme is None:
            console.print_error(f"Theme '{name}' not found.")
            sys.exit(1)

    if output_yaml:
        click.echo(yaml.dump(theme.to_dict(), default_flow_style=False, sort_keys=False), nl=False)
        return

    console.section(theme.name)
    console.print_result("Primary", theme.primary.to_hex(), value_fg=str(theme.primary))
    console.print_result("Secondary", theme.secondary.to_hex(), value_fg=str(theme.secondary))
    console.print_result("Accent", theme.accent.to_hex(), value_fg=str(theme.accent))
    console.print_result("Error", console.error_color.to_hex(), value_fg=str(console.error_color))


@cli.command("ask")
@click.pass_context
def ask(ctx):
    """Walk through the input prompts. Type Exit() to cancel."""
    console: Console = ctx.obj["console"]
    console.max_eof = 3

    try:
        name = console.get_input("Name")
        age = console.get_int_input("Age", min_value=0, max_value=150)
        budget = console.get_decimal_input("Budget")

        console.print_result("Name", name)
        console.print_result("Age", str(age))
        console.print_result("Budget", str(budget))
        console.exit_option(show_farewell=True)
    except InputCancelled:
        console.print_warning("Cancelled.")
        sys.exit(130)
    except EOFError:
        console.print_error("Input closed.")
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
