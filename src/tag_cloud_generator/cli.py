from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from .config import TagCloudConfig, load_config
from .pipeline import generate_tag_cloud
from .ranking import InvalidCountError

app = typer.Typer(help="Tag Cloud Generator CLI.", no_args_is_help=True)


@app.command()
def generate(
    input_path: Path = typer.Option(
        ...,
        "--input-path",
        "-i",
        prompt="Please enter your file name",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
    ),
    count: int = typer.Option(
        ...,
        "--count",
        "-n",
        min=0,
        prompt="How many words would you like to see in the tag cloud?",
        help="Number of words to include.",
    ),
    output_path: Path = typer.Option(
        ...,
        "--output-path",
        "-o",
        prompt="Please enter the HTML file to write to",
        help="Destination HTML file, or a directory to write <input>.html into.",
    ),
    title: str | None = typer.Option(
        None, "--title", help="Title shown in the page header (defaults to file name)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    escape_html: bool | None = typer.Option(
        None,
        "--escape-html/--no-escape-html",
        help="Override config escape_html flag.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress."),
) -> None:
    """Generate an HTML tag cloud of the most frequent words in a text file."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
        )
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if escape_html is not None:
        cfg.escape_html = escape_html

    text = _read_document(input_path, cfg)
    try:
        cloud = generate_tag_cloud(text, count, title or input_path.name, cfg)
    except InvalidCountError as exc:
        raise typer.BadParameter(str(exc), param_hint="--count") from exc

    destination = _resolve_output_path(input_path, output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(cloud.html, encoding=cfg.encoding)
    typer.echo(f"Wrote tag cloud of {len(cloud.subset)} words to {destination}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TagCloudConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _read_document(path: Path, config: TagCloudConfig) -> str:
    """Read the source file and join its lines with newlines."""
    try:
        with path.open("r", encoding=config.encoding) as handle:
            lines = [line.rstrip("\r\n") for line in handle]
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(
            f"Unable to read {path}: {exc}", param_hint="--input-path"
        ) from exc
    return "\n".join(lines)


def _resolve_output_path(input_path: Path, output_path: Path) -> Path:
    """Write into ``output_path`` directly, or as <input stem>.html inside a directory."""
    if output_path.is_dir():
        return output_path / f"{input_path.stem}.html"
    return output_path


if __name__ == "__main__":
    main()
