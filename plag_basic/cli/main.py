"""Command-line interface for plag-basic."""

import sys
import logging
from pathlib import Path
import click
from pydantic import ValidationError

from .. import __version__
from ..core import (
    Config,
    PlagiarismDetector,
    ReportGenerator,
    project_results
)
from ..core.files import read_directory, read_file


# Configure logging
def setup_logging(verbose: bool):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_config(**kwargs) -> Config:
    """Build a Config, exiting with an error message on invalid values."""
    try:
        return Config(**{k: v for k, v in kwargs.items() if v is not None})
    except ValidationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="plag-basic")
def cli():
    """Checks for plagiarism between text files using word n-gram matching."""
    pass


@cli.command()
@click.option('--untrusted', '-u', 'udir', required=True, type=click.Path(path_type=Path),
              help='Directory of untrusted text files, one submission per file')
@click.option('--trusted', '-t', 'tdir', type=click.Path(path_type=Path),
              help='Directory of trusted text files, one possible source per file')
@click.option('--ignore', '-i', 'idir', type=click.Path(path_type=Path),
              help='Directory of text files whose content is ignored')
@click.option('--metric', '-m', type=click.Choice(['equal', 'lev']), default=None,
              help='Fragment comparison metric')
@click.option('--sensitivity', '-n', type=int, default=None, help='Number of words per fragment')
@click.option('--similarity', '-s', type=int, default=None, help='Cutoff value for the chosen metric')
@click.option('--cli', 'output_cli', is_flag=True, help='Print results on the command line')
@click.option('--html', 'output_html', is_flag=True, help='Write results to an HTML report')
@click.option('--openhtml', 'open_html', is_flag=True, help='Open the HTML report after writing it')
@click.option('--json', 'json_output', type=click.Path(path_type=Path), help='Also write a JSON report to this path')
@click.option('--rich', 'output_rich', is_flag=True, help='Show highlighted texts side by side on the console')
@click.option('--output-dir', '-o', type=click.Path(path_type=Path), default=None, help='Directory for the HTML report')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def check(
    udir: Path,
    tdir: Path,
    idir: Path,
    metric: str,
    sensitivity: int,
    similarity: int,
    output_cli: bool,
    output_html: bool,
    open_html: bool,
    json_output: Path,
    output_rich: bool,
    output_dir: Path,
    verbose: bool
):
    """Check a directory of submissions for plagiarism."""
    setup_logging(verbose)

    config = build_config(
        metric=metric,
        sensitivity=sensitivity,
        similarity=similarity,
        output_dir=str(output_dir) if output_dir else None
    )

    # Read everything before comparing anything
    try:
        untrusted = read_directory(str(udir))
        trusted = read_directory(str(tdir)) if tdir else []
        ignored = [text for _, text in read_directory(str(idir))] if idir else []
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    detector = PlagiarismDetector(config)
    run = detector.run(untrusted, trusted, ignored)
    generator = ReportGenerator()

    if output_cli:
        click.echo(generator.generate_text(run))

    if output_rich:
        from .display import display_results
        display_results(project_results(run.all_results(), run.clean_texts))

    if json_output:
        generator.save_report(run, str(json_output), "json")
        click.echo(f"JSON report saved: {json_output}")

    if output_html or open_html:
        report_path = Path(config.output_dir) / config.report_name
        generator.save_report(run, str(report_path), "html")
        click.echo(f"HTML report saved: {report_path}")
        if open_html:
            click.launch(str(report_path))


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, path_type=Path))
@click.option('--sensitivity', '-n', type=int, default=None, help='Number of words per fragment')
@click.option('--preview', type=int, default=3, help='Number of fragments to preview')
def analyze(file_path: Path, sensitivity: int, preview: int):
    """
    Show fragment statistics for a file without running detection.

    FILE_PATH: Path to the file to analyze
    """
    from ..core import clean_text, FragmentIndexer

    config = build_config(sensitivity=sensitivity)

    click.echo(f"Analyzing file: {file_path}")

    try:
        text = read_file(str(file_path))
    except (OSError, ValueError) as e:
        click.echo(f"Error reading file: {e}", err=True)
        sys.exit(1)

    words = clean_text(text)
    fragments, locations = FragmentIndexer(config.sensitivity).index(words)
    total = sum(len(locs) for locs in locations.values())
    repeated = sum(1 for locs in locations.values() if len(locs) > 1)

    click.echo(f"\nFragment Statistics:")
    click.echo(f"   Words: {len(words):,}")
    click.echo(f"   Sensitivity: {config.sensitivity} words")
    click.echo(f"   Total fragments: {total:,}")
    click.echo(f"   Distinct fragments: {len(fragments):,}")
    click.echo(f"   Repeated fragments: {repeated:,}")

    if total:
        click.echo(f"\nPreview of first {preview} fragments:")
        ordered = sorted(locations.items(), key=lambda item: item[1][0])
        for fragment, locs in ordered[:preview]:
            click.echo(f"   [{locs[0][0]}:{locs[0][1]}] {fragment}")


@cli.command()
@click.argument('text1')
@click.argument('text2')
@click.option('--metric', '-m', type=click.Choice(['equal', 'lev']), default=None, help='Fragment comparison metric')
@click.option('--sensitivity', '-n', type=int, default=None, help='Number of words per fragment')
@click.option('--similarity', '-s', type=int, default=None, help='Cutoff value for the chosen metric')
def quick_compare(text1: str, text2: str, metric: str, sensitivity: int, similarity: int):
    """
    Quick comparison of two text strings.

    TEXT1: First text string
    TEXT2: Second text string
    """
    config = build_config(metric=metric, sensitivity=sensitivity, similarity=similarity)
    run = PlagiarismDetector(config).run([("text1", text1), ("text2", text2)])

    if not run.untrusted_results:
        click.echo("No matching fragments.")
        return

    result = run.untrusted_results[0]
    highlighted = project_results([result], run.clean_texts)[0]
    click.echo(f"Matching fragments: {len(result.matching_fragments)}")
    click.echo(f"Text 1 coverage: {highlighted.text1_plag_percent}%")
    click.echo(f"Text 2 coverage: {highlighted.text2_plag_percent}%")
    for f1, f2 in result.matching_fragments:
        if result.equal_fragments:
            click.echo(f"   {f1}")
        else:
            click.echo(f"   {f1}  ~  {f2}")


if __name__ == "__main__":
    cli()
