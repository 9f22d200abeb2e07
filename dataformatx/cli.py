"""CLI entry point for DataFormatX."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from dataformatx.config import CONFIG_FILENAME, DataFormatXConfig, LLMSettings, load_config, save_config
from dataformatx.config.loader import DEFAULT_CONFIG_TEMPLATE, expand_env_vars, read_raw_config
from dataformatx.config.models import MANAGED_API_KEY_ENV
from dataformatx.converter import ConversionRequest, FormatConverter
from dataformatx.errors import ConversionError
from dataformatx.formats import (
    SAMPLE_DATA,
    FormatDescriptor,
    find_by_extension,
    find_format,
    list_formats,
)

app = typer.Typer(
    name="dataformatx",
    help="Convert between data, document, and code formats with an LLM.",
)

config_app = typer.Typer(help="Manage DataFormatX configuration.")
app.add_typer(config_app, name="config")

# Converted content goes to stdout; everything else goes here.
console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: DataFormatXConfig | None = None
_config_path: str | None = None


def _get_config() -> DataFormatXConfig:
    if _config is None:
        return load_config(_config_path)
    return _config


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    return typer.Exit(1)


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Global options."""
    global _config, _config_path
    _config_path = config
    try:
        _config = load_config(config)
    except ValueError as e:
        raise _fail(str(e))

    level = logging.DEBUG if verbose else _LOG_LEVELS[_config.log_level]
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")


def _resolve_format(
    name: str | None, path: str | None, role: str
) -> FormatDescriptor:
    """Resolve --from/--to, falling back to the file extension."""
    if name:
        desc = find_format(name)
        if desc is None:
            raise _fail(f"Unknown {role} format {name!r}. Run 'dataformatx formats' to list them.")
        return desc
    if path and path != "-":
        desc = find_by_extension(Path(path).suffix)
        if desc is not None:
            return desc
    raise _fail(f"Cannot infer the {role} format; pass --{role} explicitly.")


def _read_input(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    try:
        return Path(file).read_text(encoding="utf-8")
    except OSError as e:
        raise _fail(f"Cannot read {file}: {e}")


@app.command()
def convert(
    file: str = typer.Argument("-", help="Input file, or '-' for stdin"),
    from_format: Annotated[
        str | None, typer.Option("--from", "-f", help="Source format (default: from file extension)")
    ] = None,
    to_format: Annotated[
        str | None, typer.Option("--to", "-t", help="Target format (default: from --output extension)")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write result to file")
    ] = None,
    provider: Annotated[
        str | None, typer.Option("--provider", help="managed | openai_compatible")
    ] = None,
    model: Annotated[str | None, typer.Option("--model", "-m", help="Model name")] = None,
    base_url: Annotated[
        str | None, typer.Option("--base-url", help="OpenAI-compatible endpoint root")
    ] = None,
    api_key_env: Annotated[
        str | None, typer.Option("--api-key-env", help="Env var holding the API key")
    ] = None,
) -> None:
    """Convert a file (or stdin) from one format to another."""
    cfg = _get_config()

    source = _resolve_format(from_format, file, "from")
    target = _resolve_format(to_format, output, "to")

    overrides = {
        k: v
        for k, v in {
            "provider": provider, "model": model, "base_url": base_url, "api_key_env": api_key_env,
        }.items()
        if v is not None
    }
    if provider is not None and provider != cfg.llm.provider:
        # configured key and model belong to the other backend
        overrides["api_key"] = ""
        overrides.setdefault("model", "")
        overrides.setdefault("api_key_env", MANAGED_API_KEY_ENV if provider == "managed" else "")
    try:
        settings = LLMSettings(**{**cfg.llm.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise _fail(f"Invalid LLM settings: {e}")

    content = _read_input(file)
    request = ConversionRequest(
        content=content,
        from_format=source.value,
        to_format=target.value,
        config=settings.to_provider_config(),
    )

    console.print(
        f"[bold]Converting[/bold] {source.label} → {target.label} "
        f"(llm: {settings.provider}, model: {settings.model or 'default'})...",
        highlight=False,
    )
    converter = FormatConverter(max_input_chars=cfg.max_input_chars)
    try:
        result = asyncio.run(converter.convert(request))
    except ConversionError as e:
        raise _fail(str(e))

    if output:
        try:
            Path(output).write_text(result.content, encoding="utf-8")
        except OSError as e:
            raise _fail(f"Cannot write {output}: {e}")
        console.print(f"[green]Written to[/green] {output}", highlight=False)
    else:
        typer.echo(result.content)


@app.command()
def formats() -> None:
    """List supported formats."""
    table = Table(title="Supported Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Extension")
    table.add_column("MIME type", style="dim")
    table.add_column("Sample", justify="center")
    for desc in list_formats():
        table.add_row(
            desc.label,
            desc.category,
            f".{desc.extension}",
            desc.mime_type,
            "✓" if desc.value in SAMPLE_DATA else "",
        )
    Console().print(table)


@app.command()
def sample(
    fmt: str = typer.Argument(..., metavar="FORMAT", help="Format to show a sample for"),
) -> None:
    """Print a sample document in the given format."""
    desc = find_format(fmt)
    if desc is None:
        raise _fail(f"Unknown format {fmt!r}")
    text = SAMPLE_DATA.get(desc.value)
    if text is None:
        raise _fail(f"No sample available for {desc.label}")
    typer.echo(text)


# ---------------------------------------------------------------------------
# config subcommands
# ---------------------------------------------------------------------------


@config_app.command("init")
def config_init(
    path: Annotated[str, typer.Option("--path", help="Where to write the file")] = CONFIG_FILENAME,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Write a starter config file."""
    dest = Path(path)
    if dest.exists() and not force:
        raise _fail(f"{dest} already exists (use --force to overwrite)")
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE)
    console.print(f"[green]Created[/green] {dest}", highlight=False)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration (API key masked)."""
    cfg = _get_config()
    data = cfg.model_dump(mode="json")
    if data["llm"].get("api_key"):
        data["llm"]["api_key"] = _mask(data["llm"]["api_key"])
    Console().print(Syntax(yaml.safe_dump(data, sort_keys=False), "yaml", theme="monokai"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Dotted key, e.g. llm.model"),
    value: str = typer.Argument(..., help="New value"),
    path: Annotated[
        str | None, typer.Option("--path", help=f"Config file to update (default: --config or ./{CONFIG_FILENAME})")
    ] = None,
) -> None:
    """Update one setting and save it."""
    dest = Path(path or _config_path or CONFIG_FILENAME)
    try:
        # ${VAR} references stay unexpanded so secrets are never written back
        raw = (read_raw_config(dest, expand_env=False) if dest.exists() else None) or {}
    except ValueError as e:
        raise _fail(str(e))

    defaults = DataFormatXConfig().model_dump(mode="json")
    *parents, leaf = key.split(".")
    node, known = raw, defaults
    for part in parents:
        if not isinstance(known.get(part), dict):
            raise _fail(f"Unknown setting {key!r}")
        known = known[part]
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    if leaf not in known:
        raise _fail(f"Unknown setting {key!r}")
    # keep strings as typed; parse numbers and booleans for the rest
    node[leaf] = value if isinstance(known[leaf], str) else yaml.safe_load(value)

    try:
        DataFormatXConfig(**expand_env_vars(raw))
    except PydanticValidationError as e:
        raise _fail(f"Invalid value for {key}: {e}")
    save_config(raw, dest)
    console.print(f"[green]Saved[/green] {key} to {dest}", highlight=False)


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "****"
    return f"{secret[:4]}...{secret[-4:]}"
