#!/usr/bin/env python3

import asyncio
import json
import sys

import click
from dotenv import load_dotenv

from fieldcheck.context import ValidationContext
from fieldcheck.error_details import get_error_human_message
from fieldcheck.utils.logging import setup_logging

rules_option = click.option(
    "--rules",
    "rules_files",
    multiple=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="JSON or YAML constraint file; may be given several times, later files win",
)
url_option = click.option(
    "--url",
    help="URL serving the constraint map as JSON (defaults to FIELDCHECK_RULES_URL)",
)


def build_context(rules_files, url) -> ValidationContext:
    """Create a context and merge every requested constraint source."""
    context = ValidationContext.from_settings()
    try:
        for path in rules_files:
            context.store.load_from_file(path)

        if url or (not rules_files and context.settings.rules.is_remote()):
            if not asyncio.run(context.load_rules(url)):
                raise click.ClickException(
                    f"Could not load constraints from {url or context.settings.rules.url}"
                )
    except BaseException:
        context.close()
        raise
    return context


def echo_result(field_name, result) -> None:
    if result.valid:
        click.echo(f"✅ {field_name}: valid")
        return
    for violation in result.violations:
        message = violation.message or violation.validator
        click.echo(f"❌ {field_name}: {violation.validator} - {message}")


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """fieldcheck - declarative field validation"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("type_name")
@click.argument("field_name")
@click.argument("value")
@rules_option
@url_option
def validate(type_name, field_name, value, rules_files, url) -> None:
    """Validate VALUE against the constraints of TYPE_NAME.FIELD_NAME"""
    try:
        with build_context(rules_files, url) as context:
            result = context.validate(type_name, field_name, value)
    except click.ClickException:
        raise
    except Exception as e:
        raise click.ClickException(get_error_human_message(e)) from e

    echo_result(field_name, result)
    if result.failed:
        sys.exit(1)


@cli.command()
@click.argument("type_name")
@click.option(
    "--values",
    required=True,
    help='JSON object of field values, e.g. \'{"name": "", "age": "12"}\'',
)
@rules_option
@url_option
def check(type_name, values, rules_files, url) -> None:
    """Validate several fields of TYPE_NAME at once"""
    try:
        field_values = json.loads(values)
        if not isinstance(field_values, dict):
            raise ValueError("--values must be a JSON object")
        with build_context(rules_files, url) as context:
            results = context.validate_fields(type_name, field_values)
            has_errors = context.engine.has_errors(results)
    except click.ClickException:
        raise
    except Exception as e:
        raise click.ClickException(get_error_human_message(e)) from e

    for field_name, result in results.items():
        echo_result(field_name, result)
    if has_errors:
        sys.exit(1)


@cli.command()
@rules_option
@url_option
def rules(rules_files, url) -> None:
    """Print the merged constraint map as JSON"""
    try:
        with build_context(rules_files, url) as context:
            constraints = json.dumps(context.get_constraints(), indent=2, default=str)
    except click.ClickException:
        raise
    except Exception as e:
        raise click.ClickException(get_error_human_message(e)) from e

    click.echo(constraints)


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
