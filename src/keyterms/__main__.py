"""CLI entry point for keyterms."""

import fnmatch
import logging
import sys
from pathlib import Path

import click
import yaml

from .adapters.archive import ZipArchiveWriter
from .adapters.reader import FilesystemReader
from .adapters.storage import FilesystemAdapter
from .config import load_settings
from .domain.errors import ArchiveUnavailable
from .domain.extraction import TermExtractor
from .domain.models import DocumentOutcome, DocumentSource, Success
from .domain.naming import normalize_filename
from .domain.services import ArchiveBuilder, BatchProcessor


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """Keyterms - extract IMPORTANT TERMS lists from text documents."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None


def collect_files(path: Path, patterns: list[str], recursive: bool) -> list[Path]:
    """Collect files matching patterns from path (file or directory)."""
    if path.is_file():
        return [path] if any(fnmatch.fnmatch(path.name, p) for p in patterns) else []

    found: set[Path] = set()
    for pattern in patterns:
        matches = path.rglob(pattern) if recursive else path.glob(pattern)
        found.update(p for p in matches if p.is_file())
    return sorted(found)


def keyword_label(count: int) -> str:
    return f"{count} Keyword{'s' if count != 1 else ''}"


def render_outcome(outcome: DocumentOutcome) -> str:
    """Render an outcome as a block of plain text."""
    if isinstance(outcome, Success):
        extraction = outcome.extraction
        return "\n".join(
            [
                f"✓ {outcome.display_name}",
                extraction.text,
                f"[{keyword_label(extraction.term_count)}]",
            ]
        )
    return f"✗ {outcome.display_name}\n{outcome.error_message}"


def outcome_to_dict(outcome: DocumentOutcome) -> dict:
    if isinstance(outcome, Success):
        extraction = outcome.extraction
        return {
            "name": outcome.display_name,
            "status": extraction.status.value,
            "term_count": extraction.term_count,
            "terms": list(extraction.terms),
        }
    return {"name": outcome.display_name, "error": outcome.error_message}


@cli.command()
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option("--recursive/--no-recursive", default=False, help="Search directories recursively")
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the ZIP archive",
)
@click.option("--zip-name", help="Archive file name (.zip is added if missing)")
@click.option("--no-archive", is_flag=True, help="Only print results")
@click.option("--workers", type=click.IntRange(min=1), help="Documents read in parallel")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "yaml"]),
    default="text",
    help="Result output format",
)
@click.pass_context
def extract(
    ctx: click.Context,
    paths: tuple[Path, ...],
    recursive: bool,
    output: Path | None,
    zip_name: str | None,
    no_archive: bool,
    workers: int | None,
    fmt: str,
) -> None:
    """Extract terms from text files and bundle them into a ZIP."""
    settings = load_settings(ctx.obj["config_path"])

    files: list[Path] = []
    for path in paths:
        files.extend(collect_files(path, settings.batch.patterns, recursive))

    if not files:
        click.echo("No files to process")
        return

    # Wire up adapters
    processor = BatchProcessor(
        reader=FilesystemReader(),
        extractor=TermExtractor(settings.extraction.heading),
        max_workers=workers or settings.batch.max_workers,
        boilerplate=settings.extraction.boilerplate,
    )
    sources = [DocumentSource(name=f.name, source=f) for f in files]

    with click.progressbar(
        processor.iter_process(sources),
        length=len(sources),
        label="Extracting terms",
        file=sys.stderr,
    ) as bar:
        outcomes = list(bar)

    if fmt == "yaml":
        documents = [outcome_to_dict(o) for o in outcomes]
        click.echo(yaml.safe_dump({"documents": documents}, sort_keys=False, allow_unicode=True))
    else:
        for outcome in outcomes:
            click.echo(render_outcome(outcome))
            click.echo()

    failed = sum(1 for o in outcomes if not o.ok)
    click.echo(f"Processed: {len(outcomes) - failed} success, {failed} errors")

    archive_failed = False
    if not no_archive:
        if failed == len(outcomes):
            click.echo("No results to archive")
        else:
            builder = ArchiveBuilder(
                writer=ZipArchiveWriter(),
                entry_extension=settings.archive.entry_extension,
                default_archive_name=settings.archive.default_name,
            )
            storage = FilesystemAdapter(output or settings.archive.output)
            try:
                archive = builder.write(outcomes, zip_name)
                click.echo(f"Archive: {storage.store(archive)}")
            except (ArchiveUnavailable, OSError) as e:
                click.echo(f"Archive not created: {e}", err=True)
                archive_failed = True

    if failed or archive_failed:
        sys.exit(1)


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def normalize(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print the display name derived from each filename."""
    settings = load_settings(ctx.obj["config_path"])
    for name in names:
        click.echo(normalize_filename(name, settings.extraction.boilerplate))


if __name__ == "__main__":
    cli()
