# === FILE: site_harvest/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SiteHarvest.

Usage:
  site-harvest [OPTIONS] URL

Options:
  --depth, -d INT         Maximum crawl depth (default: 2)
  --concurrency, -n INT   Simultaneous fetches (default: 5)
  --user-agent TEXT       User-Agent header
  --timeout SEC           Per-request timeout (default: 10)
  --config, -c PATH       YAML/JSON config file (replaces the flags above)
  --selectors, -s TEXT    CSS selectors: name1=sel1,name2=sel2
  --interactive, -i       Enter CSS selectors interactively
  --output, -o PATH       Output file (default: output.json)
  --log-level LEVEL       Logging level (DEBUG, INFO, ...)
  --log-file PATH         Also write logs to this file
  --log-format TEXT       Format string for log lines
  --version, -v           Show the SiteHarvest version

Examples:
  site-harvest https://example.com
  site-harvest -s "title=h1,content=.article" https://example.com
  site-harvest -c config.json https://example.com
  site-harvest -i https://example.com
"""
import sys
import asyncio
from pathlib import Path

import click

from site_harvest import __version__
from site_harvest.config import DEFAULT_SELECTORS, CrawlerConfig, load_config, parse_selectors
from site_harvest.crawler.crawler import validate_seed_url
from site_harvest.exceptions import ConfigError, InvalidSeedURLError
from site_harvest.interactive_cli import prompt_selectors
from site_harvest.logger import DEFAULT_FORMAT, init_logging
from site_harvest.report.json_report import save_pages
from site_harvest.scanner import start_crawl

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteHarvest, version %(version)s')
@click.argument('url')
@click.option('--depth', '-d', 'max_depth', type=int, default=2, show_default=True,
              help='Maximum crawl depth')
@click.option('--concurrency', '-n', type=int, default=5, show_default=True,
              help='Number of simultaneous fetches')
@click.option('--user-agent', 'user_agent', default='SiteHarvest/1.0', show_default=True,
              help='User-Agent header')
@click.option('--timeout', type=float, default=10.0, show_default=True,
              help='Timeout for each request (seconds)')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON config file'
)
@click.option('--selectors', '-s', default='',
              help='CSS selectors in format: name1=selector1,name2=selector2')
@click.option('--interactive', '-i', is_flag=True,
              help='Interactive mode to input CSS selectors')
@click.option(
    '--output', '-o', 'output',
    default='output.json', show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Output file name'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stdout only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    help='Logging format string, e.g. "%(levelname)s %(message)s"'
)
def cli(url, max_depth, concurrency, user_agent, timeout, config_path, selectors,
        interactive, output, log_level, log_file, log_format):
    """Crawl URL recursively and save the extracted pages as JSON."""
    try:
        init_logging(level=log_level, log_file=log_file, log_format=log_format)
    except ValueError as e:
        print_error(f'Invalid log format: {e}')

    try:
        validate_seed_url(url)
    except InvalidSeedURLError as e:
        print_error(f'Error: {e}')

    try:
        if config_path is not None:
            cfg = load_config(config_path)
        else:
            cfg = CrawlerConfig(
                max_depth=max_depth,
                concurrency=concurrency,
                user_agent=user_agent,
                timeout=timeout,
            )
    except (ConfigError, FileNotFoundError) as e:
        print_error(f'Error loading config: {e}')
    except ValueError as e:
        print_error(f'Invalid option: {e}')

    if selectors:
        try:
            cfg = cfg.with_selectors(parse_selectors(selectors))
        except ValueError as e:
            print_error(f'Error parsing selectors: {e}')

    if interactive:
        cfg = cfg.with_selectors(prompt_selectors())

    if not cfg.css_selectors:
        cfg = cfg.with_selectors(DEFAULT_SELECTORS)
        click.echo('\nUsing default CSS selectors (headings, paragraphs, links)')

    click.echo('\nCSS Selectors configured:')
    for name, selector in cfg.css_selectors.items():
        click.echo(f'  {name}: {selector}')

    click.echo(f'\nStarting crawl: {url}')
    pages = asyncio.run(start_crawl(cfg, url))
    click.echo(f'\nSuccessfully crawled {len(pages)} pages')

    try:
        saved = save_pages(pages, output)
    except OSError as e:
        print_error(f'Error saving results: {e}')
    click.echo(f'Results saved to {saved}')


if __name__ == "__main__":
    cli()
