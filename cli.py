# === cli.py ===

import click
import logging

from apps_chart.report_generator import generate_apps_markdown, write_markdown_report
from apps_chart.yaml_loader import AppScanError

@click.command()
@click.argument("root_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False),
              help="Write the Markdown to this file instead of standard output")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Enable verbose (DEBUG) logging")
def generate(root_dir, output, verbose):
    """
    Scans ROOT_DIR for <app>/<version>/app.yml files and prints a Markdown
    summary of every app: description, versions and supported platforms.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    logger = logging.getLogger(__name__)
    logger.debug(f"Generating apps chart for `{root_dir}` (verbose={verbose})")

    try:
        markdown = generate_apps_markdown(root_dir)
    except AppScanError as e:
        logger.error(f"Scan failed: {e}")
        raise click.ClickException(str(e)) from e

    if output:
        logger.info(f"Writing Markdown to `{output}` …")
        write_markdown_report(markdown, output)
    else:
        click.echo(markdown, nl=False)


if __name__ == "__main__":
    generate()
