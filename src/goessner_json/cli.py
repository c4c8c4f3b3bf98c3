import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from goessner_json.config import ConversionConfig
from goessner_json.engine import xml_to_json
from goessner_json.errors import ConversionError
from goessner_json.logging_setup import configure_logging, get_logger
from goessner_json.serialize import dump, dumps
from goessner_json.settings import Settings, load_settings

console = Console(stderr=True)

app = typer.Typer(help="Convert XML documents to JSON (Goessner mapping).")


def _settings(env: str) -> Settings:
    load_dotenv(override=False)
    s = load_settings(env)
    configure_logging(
        level=s.logging.level,
        format_type=s.logging.format,
        structured=s.logging.structured,
    )
    return s


@app.command()
def convert(
    input: Path = typer.Argument(..., help="XML file to convert"),
    output: Optional[Path] = typer.Argument(
        None, help="Where to write JSON (default: stdout)"
    ),
    env: str = typer.Option("dev", help="Config environment"),
    indent: Optional[int] = typer.Option(None, help="Override JSON indent"),
    attribute_prefix: Optional[str] = typer.Option(None, help="Prefix for attribute keys"),
    text_key: Optional[str] = typer.Option(None, help="Key for element text"),
    cdata_key: Optional[str] = typer.Option(None, help="Key for CDATA content"),
    no_collapse: bool = typer.Option(
        False, "--no-collapse", help="Keep text-only elements as objects"
    ),
    namespace_separator: Optional[str] = typer.Option(
        None, help="Joins namespace prefix and local name"
    ),
    max_depth: Optional[int] = typer.Option(None, help="Maximum element nesting"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Fail on key collisions instead of overwriting"
    ),
):
    s = _settings(env)
    log = get_logger("goessner_json.cli")

    overrides = {
        "attribute_prefix": attribute_prefix,
        "text_key": text_key,
        "cdata_key": cdata_key,
        "namespace_separator": namespace_separator,
        "max_depth": max_depth,
        "strict": strict,
    }
    if no_collapse:
        overrides["collapse_single_child_text"] = False
    overrides = {k: v for k, v in overrides.items() if v is not None}
    try:
        config = ConversionConfig(**{**s.conversion.model_dump(), **overrides})
    except ValidationError as e:
        raise typer.BadParameter(str(e))

    if not input.exists():
        console.print(f"[red]Input file not found:[/] {escape(str(input))}")
        raise typer.Exit(code=2)

    log.info("Converting XML", input=str(input), strict=config.strict)
    try:
        with open(input, "rb") as fh:
            document = xml_to_json(fh, config)
    except ConversionError as e:
        log.error("Conversion failed", input=str(input), error=str(e))
        console.print(f"[red]Conversion failed:[/] {escape(str(e))}")
        raise typer.Exit(code=1)
    except OSError as e:
        log.error("Cannot read input", input=str(input), error=str(e))
        console.print(f"[red]Cannot read input:[/] {escape(str(e))}")
        raise typer.Exit(code=1)

    out_indent = indent if indent is not None else s.output.indent
    if output is None:
        sys.stdout.write(dumps(document, indent=out_indent, ensure_ascii=s.output.ensure_ascii))
        sys.stdout.write("\n")
    else:
        written = dump(document, output, indent=out_indent, ensure_ascii=s.output.ensure_ascii)
        log.info("JSON written", output=str(written))


@app.command("show-config")
def show_config(env: str = typer.Option("dev", help="Config environment")):
    """Print the effective settings for an environment."""
    s = _settings(env)
    console.print(s.model_dump())


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)
