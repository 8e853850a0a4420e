"""Command line entry-point for export-to-CoNLL coreference conversion."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, TextIO

import click
import yaml
from pydantic import ValidationError

from .core.pipeline import ConversionConfig, ConversionPipeline
from .errors import ConversionError
from .utils.config import ConfigManager
from .utils.logging import setup_logging

logger = logging.getLogger("negra_coref.cli")


def _load_config(
    config_path: Optional[Path],
    keep_comments: bool,
    encoding: Optional[str],
    format_version: Optional[int],
) -> ConversionConfig:
    if config_path is not None and not config_path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    try:
        manager = ConfigManager(config_path)
    except (yaml.YAMLError, ValueError) as exc:
        raise click.ClickException(f"Invalid config file: {exc}") from exc

    # command line flags win over the config file
    if keep_comments:
        manager.set("writer.keep_comments", True)
    if encoding:
        manager.set("reader.encoding", encoding)
    if format_version:
        manager.set("reader.format_version", format_version)

    try:
        return ConversionConfig.from_manager(manager)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


@click.command()
@click.option("--input", "-i", "input_path", type=click.Path(dir_okay=False, allow_dash=True, path_type=Path), default="-", help="Export file path (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="YAML configuration file")
@click.option("--keep-comments", "-k", is_flag=True, help="Keep the export comments of each token in the output")
@click.option("--encoding", default=None, help="Input encoding (overrides the config file)")
@click.option("--format-version", type=click.IntRange(3, 4), default=None, help="Export format when the file has no #FORMAT line")
@click.option("--stats", "show_stats", is_flag=True, help="Print conversion statistics as JSON to stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    input_path: Path,
    output: TextIO,
    config_path: Optional[Path],
    keep_comments: bool,
    encoding: Optional[str],
    format_version: Optional[int],
    show_stats: bool,
    verbose: bool,
) -> None:
    """Convert a NEGRA export corpus with coreference comments to CoNLL-X."""

    setup_logging(verbose=verbose)

    config = _load_config(config_path, keep_comments, encoding, format_version)
    pipeline = ConversionPipeline(config)

    try:
        with click.open_file(str(input_path), "r", encoding=config.encoding) as lines:
            stats = pipeline.convert(lines, output)
    except OSError as exc:
        raise click.ClickException(f"Can't read input: {exc}") from exc
    except LookupError as exc:
        raise click.ClickException(f"Unknown input encoding: {config.encoding}") from exc
    except ConversionError as exc:
        raise click.ClickException(str(exc)) from exc

    if verbose:
        logger.info(f"Store holds {len(pipeline.store)} spans from {pipeline.store.sentence_count} sentences")

    if show_stats:
        click.echo(json.dumps(stats.as_dict()), err=True)


if __name__ == "__main__":  # pragma: no cover
    main()
