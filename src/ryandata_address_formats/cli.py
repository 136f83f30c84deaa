from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer

from ryandata_address_formats.export import formats_to_dataframe
from ryandata_address_formats.models import DataIntegrityError
from ryandata_address_formats.service import AddressFormatService

DEFINITION_PATH_ENV = "RYANDATA_ADDRESS_FORMATS_PATH"

app = typer.Typer(help="Look up and export per-country address formats.")


class ExportFormat(str, Enum):
    csv = "csv"
    json = "json"


DefinitionPathOption = typer.Option(
    None,
    "--definition-path",
    envvar=DEFINITION_PATH_ENV,
    help="Directory of <countryCode>.json definitions (defaults to the bundled set).",
)
LocaleOption = typer.Option(None, "--locale", "-l", help="Locale to translate to, e.g. fr-CA.")


def _build_service(definition_path: Optional[Path]) -> AddressFormatService:
    if definition_path is None:
        return AddressFormatService()
    return AddressFormatService(source_type="json", definition_path=definition_path)


def _fail(error: DataIntegrityError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command("show")
def show(
    country_code: str = typer.Argument(..., help="Country code, e.g. US."),
    locale: Optional[str] = LocaleOption,
    definition_path: Optional[Path] = DefinitionPathOption,
) -> None:
    """Print the address format for one country as JSON."""
    service = _build_service(definition_path)
    try:
        address_format = service.get(country_code, locale)
    except DataIntegrityError as e:
        _fail(e)
    typer.echo(json.dumps(address_format.to_dict(), indent=2, ensure_ascii=False))


@app.command("list")
def list_codes(definition_path: Optional[Path] = DefinitionPathOption) -> None:
    """List the country codes with a definition."""
    service = _build_service(definition_path)
    for code in service.source.list_country_codes():
        typer.echo(code)


@app.command("export")
def export(
    locale: Optional[str] = LocaleOption,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="File to write to (defaults to stdout)."
    ),
    output_format: ExportFormat = typer.Option(
        ExportFormat.json, "--format", "-f", help="Output format."
    ),
    definition_path: Optional[Path] = DefinitionPathOption,
) -> None:
    """Export every address format."""
    service = _build_service(definition_path)
    try:
        formats = service.get_all(locale)
    except DataIntegrityError as e:
        _fail(e)

    if output_format is ExportFormat.csv:
        content = formats_to_dataframe(formats).to_csv()
    else:
        payload = {code: formats[code].to_dict() for code in sorted(formats)}
        content = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

    if output is None:
        typer.echo(content, nl=False)
    else:
        output.write_text(content, encoding="utf-8")
        typer.echo(f"Exported {len(formats)} address formats to {output}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
