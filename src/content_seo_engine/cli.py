"""
Command-line interface for the Content SEO Engine.

Provides commands for scoring content, measuring keyword density,
extracting keywords, rendering templates, generating slugs and head
meta tags, and writing Word audit reports.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import SiteConfig
from .keyword_analyzer import (
    competition_level,
    extract_keywords,
    is_density_optimal,
    multi_density,
    related_keywords,
)
from .keyword_loader import KeywordLoadError, load_keyword_tables, load_keywords
from .meta_tags import assemble
from .models import ContentRecord, PageMeta
from .report_writer import write_seo_report
from .scorer import score_content
from .slug import slugify
from .templates import TemplateNotFoundError, render_description, render_title

console = Console()


def _read_text(text: Optional[str], text_file: Optional[Path]) -> str:
    if text_file is not None:
        return text_file.read_text(encoding="utf-8")
    return text or ""


def _parse_vars(pairs: tuple[str, ...]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Expected KEY=VALUE, got '{pair}'", param_hint="--var")
        key, value = pair.split("=", 1)
        variables[key.strip()] = value
    return variables


def _tables_option(keyword_tables: Optional[Path]):
    if keyword_tables is None:
        return None
    return load_keyword_tables(keyword_tables)


content_options = [
    click.option("--title", "-t", required=True, help="Page title."),
    click.option("--description", "-d", default="", help="Meta description."),
    click.option("--body", "-b", default=None, help="Body text."),
    click.option(
        "--body-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Read body text from a file.",
    ),
    click.option("--keyword", "-k", required=True, help="Primary keyword."),
]


def with_content_options(func):
    for option in reversed(content_options):
        func = option(func)
    return func


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """
    Content SEO Engine - keyword analysis, scoring and head metadata.

    Examples:

        seo-engine score -t "Best MT4 Expert Advisor" -k "MT4" --body-file post.txt

        seo-engine slugify "Gold Scalper EA v2.0"
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@main.command()
@with_content_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table.")
def score(
    title: str,
    description: str,
    body: Optional[str],
    body_file: Optional[Path],
    keyword: str,
    as_json: bool,
) -> None:
    """Score the on-page SEO of a piece of content."""
    content = ContentRecord(
        title=title,
        description=description,
        body=_read_text(body, body_file),
        keyword=keyword,
    )
    result = score_content(content)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    style = "green" if result.score >= 90 else "yellow" if result.score >= 70 else "red"
    console.print(Panel.fit(f"[bold {style}]SEO score: {result.score}/100[/bold {style}]"))

    if result.issues:
        table = Table(title="Issues", show_header=True)
        table.add_column("#", style="cyan")
        table.add_column("Issue", style="red")
        for number, issue in enumerate(result.issues, start=1):
            table.add_row(str(number), issue)
        console.print(table)

    for suggestion in result.suggestions:
        console.print(f"[cyan]-[/cyan] {suggestion}")


@main.command()
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--keyword", "-k", "keywords", multiple=True, help="Keyword to measure (repeatable).")
@click.option(
    "--keywords-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="CSV or Excel file with a keyword column.",
)
def density(text_file: Path, keywords: tuple[str, ...], keywords_file: Optional[Path]) -> None:
    """Report keyword density for TEXT_FILE."""
    keyword_list = list(keywords)
    try:
        if keywords_file is not None:
            keyword_list.extend(load_keywords(keywords_file))
    except KeywordLoadError as e:
        console.print(f"[red]Keyword loading error:[/red] {e}")
        sys.exit(1)

    if not keyword_list:
        console.print("[red]Error:[/red] Provide --keyword or --keywords-file")
        sys.exit(1)

    densities = multi_density(text_file.read_text(encoding="utf-8"), keyword_list)

    table = Table(title="Keyword Density", show_header=True)
    table.add_column("Keyword", style="cyan")
    table.add_column("Density", justify="right")
    table.add_column("Optimal")
    for keyword, value in densities.items():
        optimal = "[green]yes[/green]" if is_density_optimal(value) else "[yellow]no[/yellow]"
        table.add_row(keyword, f"{value:.2f}%", optimal)
    console.print(table)


@main.command()
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--limit", "-n", type=int, default=10, help="Number of keywords (default: 10).")
def keywords(text_file: Path, limit: int) -> None:
    """Extract the most frequent keywords from TEXT_FILE."""
    for word in extract_keywords(text_file.read_text(encoding="utf-8"), limit=limit):
        click.echo(word)


@main.command()
@click.argument("keyword")
@click.option(
    "--keyword-tables",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="CSV or Excel file with keyword tiers and related terms.",
)
def competition(keyword: str, keyword_tables: Optional[Path]) -> None:
    """Estimate competition for KEYWORD and list related keywords."""
    try:
        tables = _tables_option(keyword_tables)
    except KeywordLoadError as e:
        console.print(f"[red]Keyword loading error:[/red] {e}")
        sys.exit(1)

    analysis = competition_level(keyword, tables=tables)
    console.print(f"[bold]{analysis.keyword}[/bold]")
    console.print(f"  Difficulty: [cyan]{analysis.difficulty.value}[/cyan]")
    console.print(f"  Volume:     [cyan]{analysis.volume.value}[/cyan]")
    console.print(f"  {analysis.recommendation}")

    related = related_keywords(keyword, tables=tables)
    if related:
        console.print(f"\n[cyan]Related:[/cyan] {', '.join(related)}")


@main.command(name="slugify")
@click.argument("text")
def slugify_command(text: str) -> None:
    """Convert TEXT to a URL slug."""
    click.echo(slugify(text))


@main.command()
@click.argument("template")
@click.option("--var", "variables", multiple=True, help="Template variable as KEY=VALUE (repeatable).")
def title(template: str, variables: tuple[str, ...]) -> None:
    """Render the title TEMPLATE (HOME, BLOG_POST, DOWNLOAD, CATEGORY, SEARCH)."""
    try:
        click.echo(render_title(template, _parse_vars(variables)))
    except TemplateNotFoundError as e:
        console.print(f"[red]Template error:[/red] {e.args[0]}")
        sys.exit(1)


@main.command()
@click.argument("template")
@click.option("--var", "variables", multiple=True, help="Template variable as KEY=VALUE (repeatable).")
def description(template: str, variables: tuple[str, ...]) -> None:
    """Render the description TEMPLATE (HOME, BLOG_POST, DOWNLOAD, SIGNAL, CATEGORY)."""
    try:
        click.echo(render_description(template, _parse_vars(variables), site=SiteConfig.from_env()))
    except TemplateNotFoundError as e:
        console.print(f"[red]Template error:[/red] {e.args[0]}")
        sys.exit(1)


@main.command()
@click.option("--title", "-t", required=True, help="Page title.")
@click.option("--description", "-d", default="", help="Meta description.")
@click.option("--path", "-p", default="", help="Site-relative page path.")
@click.option("--keywords", default=None, help="Comma-separated meta keywords.")
@click.option("--og-type", type=click.Choice(["website", "article", "product"]), default="website")
@click.option("--no-index", is_flag=True, default=False, help="Emit noindex, nofollow.")
def meta(
    title: str,
    description: str,
    path: str,
    keywords: Optional[str],
    og_type: str,
    no_index: bool,
) -> None:
    """Print the head meta tags for a page."""
    page = PageMeta(
        title=title,
        description=description,
        path=path,
        keywords=keywords,
        og_type=og_type,
        no_index=no_index,
    )
    click.echo(assemble(page, site=SiteConfig.from_env()).render())


@main.command()
@with_content_options
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    required=True,
    help="Output path for the Word report.",
)
@click.option("--secondary", "-s", multiple=True, help="Secondary keyword (repeatable).")
@click.option("--url", default=None, help="Page URL shown in the report header.")
@click.pass_context
def report(
    ctx: click.Context,
    title: str,
    description: str,
    body: Optional[str],
    body_file: Optional[Path],
    keyword: str,
    output: Path,
    secondary: tuple[str, ...],
    url: Optional[str],
) -> None:
    """Write a Word SEO audit report for a piece of content."""
    content = ContentRecord(
        title=title,
        description=description,
        body=_read_text(body, body_file),
        keyword=keyword,
    )
    try:
        with console.status("[bold green]Writing report..."):
            output_path = write_seo_report(content, output, secondary_keywords=secondary, source_url=url)
    except OSError as e:
        console.print(f"[red]Could not write report:[/red] {e}")
        if ctx.obj.get("verbose"):
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)

    console.print(f"[bold green]Success![/bold green] Report saved to: {output_path}")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
