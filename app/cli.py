import click
from flask import current_app


def register_commands(app):
    @app.cli.command("i18n-missing")
    def i18n_missing():
        """List keys that exist in one locale tree but not the other."""
        missing = current_app.extensions["locale_catalog"].missing_keys()
        total = 0
        for lang, keys in missing.items():
            for key in keys:
                click.echo(f"{lang}\t{key}")
            total += len(keys)
        if total:
            raise click.exceptions.Exit(1)
        click.echo("Locale trees are in sync.")

    @app.cli.command("ensure-schema")
    def ensure_schema_command():
        """Add preference columns missing from an older database."""
        from app.schema import ensure_schema
        ensure_schema()
        click.echo("Schema checked.")
