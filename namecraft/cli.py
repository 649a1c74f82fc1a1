"""CLI interface for namecraft."""

import asyncio
import json
import logging
from pathlib import Path
from typing import List

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .checkers import AvailabilityService
from .config import DEFAULT_CONFIG_PATH, load_config
from .exceptions import InvalidRequestError, ProviderError
from .generators import NameGenerator
from .generators.prompts import DEFAULT_COUNT, INDUSTRIES, STYLES
from .scoring import BrandabilityScorer


console = Console()


def setup_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )
    # Suppress noisy library logs (whois, dns)
    logging.getLogger("whois").setLevel(logging.CRITICAL)
    logging.getLogger("dns").setLevel(logging.CRITICAL)


def save_json(output: str, data):
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)
    console.print(f"[green]Saved to {output}[/green]")


def availability_icon(value) -> str:
    if value is True:
        return "[green]Y[/green]"
    if value is False:
        return "[red]N[/red]"
    return "[yellow]?[/yellow]"


@click.group()
@click.version_option(version="0.1.0")
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to YAML config')
@click.option('--log-level', default=None, help='Logging level (overrides config)')
@click.pass_context
def cli(ctx, config_path, log_level):
    """namecraft - Generate brandable names and check their domains."""
    load_dotenv()
    config = load_config(config_path)
    setup_logging(log_level or config.log_level)
    ctx.obj = config


@cli.command()
@click.argument('keywords', nargs=-1, required=True)
@click.option('--industry', '-i', default='tech', type=click.Choice(INDUSTRIES), help='Target industry')
@click.option('--style', '-s', default='modern', type=click.Choice(STYLES), help='Naming style')
@click.option('--count', '-n', default=DEFAULT_COUNT, help='Number of names to request')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
@click.pass_obj
def generate(config, keywords, industry, style, count, output):
    """Generate names from KEYWORDS and check their domains."""
    generator = NameGenerator(config=config)

    try:
        with console.status("[bold green]Generating names..."):
            names = asyncio.run(generator.generate_names(list(keywords), industry, style, count))
    except InvalidRequestError as e:
        raise click.BadParameter(str(e))
    except ProviderError as e:
        raise click.ClickException(f"Name generation failed: {e}")

    if not names:
        console.print("[yellow]The provider returned no usable names.[/yellow]")
        return

    table = Table(title="Generated Names")
    table.add_column("Name", style="cyan")
    table.add_column("AI Score", justify="right", style="green")
    table.add_column("Brandability", justify="right")
    for ext in config.extensions:
        table.add_column(ext, justify="center")
    table.add_column("Explanation", style="dim")

    for n in names:
        domains = n.domain_info.available if n.domain_info else {}
        table.add_row(
            n.name,
            f"{n.brandability_score:g}",
            f"{n.brandability_analysis.overall_score:.1f}",
            *[availability_icon(domains.get(ext)) for ext in config.extensions],
            n.explanation
        )

    console.print(table)
    console.print(f"\n[bold green]Generated {len(names)} names[/bold green]")

    if output:
        save_json(output, [n.to_dict() for n in names])


@cli.command()
@click.argument('name')
def score(name):
    """Score a single name's brandability."""
    scorer = BrandabilityScorer()
    result = scorer.analyze(name)

    console.print(f"\n[bold]Name:[/bold] {name}")
    console.print(f"[bold green]Overall Score:[/bold green] {result.overall_score:.1f}/10")
    console.print(f"\n[bold]Breakdown:[/bold]")
    console.print(f"  Length:              {result.length_score}/10")
    console.print(f"  Pronunciation:       {result.pronunciation_score}/10")
    console.print(f"  Memorability:        {result.memorability_score}/10")
    console.print(f"  Uniqueness:          {result.uniqueness_score}/10")
    console.print(f"  Domain friendliness: {result.domain_friendliness}/10")
    console.print(f"  SEO potential:       {scorer.seo_potential(name)}/10")

    risk = scorer.trademark_risk(name)
    console.print(f"  Trademark risk:      {risk['risk_level']} ({risk['recommendation']})")

    for rec in result.recommendations:
        console.print(f"  [yellow]-[/yellow] {rec}")


@cli.command()
@click.argument('name')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
@click.pass_obj
def analyze(config, name, output):
    """Full analysis of NAME: domains, brandability and SEO."""
    generator = NameGenerator(config=config)

    with console.status(f"[bold green]Analyzing {name}..."):
        analysis = asyncio.run(generator.analyze_name(name))

    domain = analysis.domain_analysis
    brand = analysis.brandability_analysis

    console.print(f"\n[bold]Name:[/bold] {name}")
    console.print(f"[bold green]Brandability:[/bold green] {brand.overall_score:.1f}/10")

    table = Table(title=f"Domains for {domain.base_name}")
    table.add_column("Extension", style="cyan")
    table.add_column("Available", justify="center")
    table.add_column("Price", justify="right")
    table.add_column("Source", style="dim")
    for ext, free in domain.available.items():
        price = domain.prices.get(ext)
        table.add_row(ext, availability_icon(free), f"${price:,.2f}" if price else "-", domain.sources.get(ext, "-"))
    console.print(table)

    if domain.error:
        console.print(f"[red]{domain.message}[/red]")

    for rec in domain.recommendations:
        colour = {'high': 'red', 'medium': 'yellow', 'low': 'dim'}.get(rec.priority, 'white')
        console.print(f"  [{colour}]{rec.priority.upper()}[/{colour}] {rec.message} - {rec.action}")

    seo = analysis.seo_analysis
    console.print(f"\n[bold]SEO:[/bold] length {seo['length_seo_score']}, "
                  f"memorability {seo['memorability_score']}, type-ability {seo['type_ability_score']}")

    for rec in analysis.recommendations:
        console.print(f"  [yellow]-[/yellow] {rec}")

    if output:
        save_json(output, analysis.to_dict())


@cli.command()
@click.argument('names', nargs=-1)
@click.option('--wordlist', '-w', default=None, help='Path to wordlist file')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
@click.pass_obj
def check(config, names, wordlist, output):
    """Check domain availability for NAMES in rate-limited batches."""
    name_list: List[str] = list(names)
    if wordlist:
        with open(wordlist) as f:
            content = f.read()
            try:
                name_list.extend(json.loads(content))
            except json.JSONDecodeError:
                name_list.extend(line.strip() for line in content.splitlines() if line.strip())

    if not name_list:
        console.print("[red]No names provided. Use arguments or --wordlist[/red]")
        return

    console.print(f"[bold]Checking {len(name_list)} names across {len(config.extensions)} extensions...[/bold]")

    service = AvailabilityService(config=config)
    with console.status("[bold green]Checking domains..."):
        results = asyncio.run(service.batch_check(name_list))

    table = Table(title="Domain Availability")
    table.add_column("Name", style="cyan")
    for ext in config.extensions:
        table.add_column(ext, justify="center")
    table.add_column("Top recommendation", style="dim")

    for r in results:
        if r.error:
            table.add_row(r.base_name, *["[yellow]?[/yellow]"] * len(config.extensions), f"[red]{r.message}[/red]")
            continue
        top = r.recommendations[0].action if r.recommendations else "-"
        table.add_row(r.base_name, *[availability_icon(r.available.get(ext)) for ext in config.extensions], top)

    console.print(table)

    if output:
        save_json(output, [r.to_dict() for r in results])


def main():
    cli()


if __name__ == '__main__':
    main()
