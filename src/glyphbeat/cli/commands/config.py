"""Config command: show and edit the application configuration.

Commands:
    - config show [--field FIELD]   # Display configuration
    - config set FIELD VALUE        # Validate, update and save one field
    - config reset                  # Restore defaults
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from glyphbeat.exceptions import GlyphBeatError, wrap_pydantic_error
from glyphbeat.models import AppConfig

from ..output import config_path, exit_with_error, load_config

logger = logging.getLogger(__name__)

FIELD_NAMES = list(AppConfig.model_fields)


@click.group(name="config")
def config_group():
    """Configure glyphbeat rendering defaults."""
    pass


@config_group.command(name="show")
@click.option("--field", type=click.Choice(FIELD_NAMES), default=None, help="Show only this field")
@click.pass_context
def show(ctx, field: Optional[str]):
    """Display the current configuration."""
    try:
        config = load_config(ctx)
    except GlyphBeatError as e:
        exit_with_error(e)

    values = config.model_dump(mode="json")
    click.echo(f"Config file: {config_path(ctx)}\n")
    for name in [field] if field else FIELD_NAMES:
        description = AppConfig.model_fields[name].description or ""
        click.echo(f"{name} = {values[name]}")
        if description:
            click.echo(f"    {description}")


@config_group.command(name="set")
@click.argument("field", type=click.Choice(FIELD_NAMES))
@click.argument("value")
@click.pass_context
def set_field(ctx, field: str, value: str):
    """
    Set FIELD to VALUE and save.

    Use 'none' to clear an optional field such as max_workers.

    \b
    Examples:
      glyphbeat config set default_frame_count 48
      glyphbeat config set theme_brightness 128
    """
    path = config_path(ctx)
    try:
        config = load_config(ctx)
        data = config.model_dump()
        data[field] = None if value.lower() == "none" else value
        try:
            updated = AppConfig.model_validate(data)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e
        updated.save(path)
    except GlyphBeatError as e:
        exit_with_error(e)

    logger.info(f"Config updated: {field}={getattr(updated, field)}")
    click.echo(f"[OK] {field} = {getattr(updated, field)}")


@config_group.command(name="reset")
@click.confirmation_option(prompt="Reset all settings to defaults?")
@click.pass_context
def reset(ctx):
    """Restore the default configuration."""
    path = config_path(ctx)
    try:
        AppConfig().save(path)
    except GlyphBeatError as e:
        exit_with_error(e)
    click.echo(f"[OK] Configuration reset: {path}")
