"""Config command - view and change CLI settings."""

import click

from ..config import CONFIG_KEYS, get_config_path, load_config, save_config
from ..output import format_resource_yaml


@click.group("config")
def config_cmd():
    """View or modify kn configuration."""


@config_cmd.command("view")
def view_cmd():
    """Show the current configuration."""
    config = load_config()
    if config.get("token"):
        config["token"] = "********"
    click.echo(f"# {get_config_path()}")
    click.echo(format_resource_yaml(config), nl=False)


@config_cmd.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
def set_cmd(key: str, value: str):
    """Set a configuration value.

    \b
    Examples:
      kn config set server http://localhost:8080
      kn config set namespace production
    """
    config = load_config()
    if key == "timeout":
        try:
            config[key] = float(value)
        except ValueError:
            raise click.BadParameter(f"not a number: {value}", param_hint="VALUE")
    else:
        config[key] = value
    save_config(config)
    click.echo(f"Set {key} in {get_config_path()}")
