"""model-input CLI — preview generated inputs against a live database."""

from __future__ import annotations

from pathlib import Path

import typer
from sqlalchemy import create_engine

from model_input.config import CONFIG_FILE, ModelInputSettings
from model_input.exceptions import ModelInputError
from model_input.generator import InputGenerator
from model_input.input_types import INPUT_TYPE_MAP
from model_input.providers.sql import SQLSchemaProvider
from model_input.registry import StaticModelRegistry

app = typer.Typer(name="model-input", help="Render HTML form inputs from database column metadata.")


@app.command()
def render(
    table: str = typer.Argument(..., help="Table that owns the column."),
    field: str = typer.Argument(..., help="Column name."),
    url: str = typer.Option(..., "--url", "-u", help="SQLAlchemy database URL, e.g. sqlite:///app.db."),
    options: str = typer.Option("", "--options", "-o", help="Options literal, e.g. \"{'label_text': 'E-mail'}\"."),
    strict: bool = typer.Option(False, "--strict", help="Fail on column types without an input mapping."),
    config: Path = typer.Option(Path(CONFIG_FILE), "--config", "-c", help="Settings file."),
) -> None:
    """Reflect TABLE.FIELD and print its label/input markup.

    Settings come from the config file, overridden by ``MODEL_INPUT_*``
    environment variables and then by ``--strict``.
    """
    try:
        settings = ModelInputSettings.load(config)
    except ValueError as exc:
        typer.echo(f"Error: invalid settings in {config}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if strict:
        settings = settings.model_copy(update={"unknown_type": "error"})

    engine = None
    try:
        engine = create_engine(url)
        provider = SQLSchemaProvider(engine)
        registry = StaticModelRegistry.from_table_names(provider.table_names())
        generator = InputGenerator(registry, provider, settings=settings)
        html = generator.render(table, field, options)
    except ModelInputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        typer.echo(f"Unexpected error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        if engine is not None:
            engine.dispose()

    typer.echo(str(html))


@app.command()
def types() -> None:
    """List the column type to input type mapping."""
    width = max(len(name) for name in INPUT_TYPE_MAP)
    for column_type, input_type in INPUT_TYPE_MAP.items():
        typer.echo(f"{column_type.ljust(width)}  {input_type}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
