"""
Validators CLI
--------------

Command-line entry point for content validators.

Available validators:
    - frontmatter: YAML front matter of every entry in a collection

Usage:
    keepsake-validate frontmatter blog
    keepsake-validate frontmatter blog content/blog/summer-trip/+page.md
    keepsake-validate --content-root site/content frontmatter memories
"""
import click
from pathlib import Path
from typing import Optional

from keepsake.core.paths import CONTENT_DIR, LOG_DIR, SITE_CONFIG_PATH


@click.group()
@click.option(
    "--content-root",
    type=click.Path(file_okay=False),
    default=str(CONTENT_DIR),
    help="Directory holding the collection directories",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(SITE_CONFIG_PATH),
    help="YAML site config with collection overrides",
)
@click.option(
    "--log-dir", type=click.Path(), default=str(LOG_DIR), help="Directory for log files"
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context, content_root: str, config_path: str, log_dir: str, verbose: bool
) -> None:
    """
    Keepsake Validation Suite.

    Check content collections for problems that make entries or images
    silently disappear from listings.
    """
    from keepsake.core.cli import setup_logger

    ctx.ensure_object(dict)
    ctx.obj["content_root"] = Path(content_root)
    ctx.obj["config_path"] = Path(config_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "validators")


@cli.command()
@click.argument("collection")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def frontmatter(ctx: click.Context, collection: str, file_path: Optional[str]) -> None:
    """
    Validate YAML front matter of a collection's entries.

    Checks for:
    - Valid YAML syntax
    - Required fields (title, date) and date format
    - Image field types and the 'images' list shape
    - Image references missing from the asset index
    """
    from keepsake.core.logging_manager import handle_cli_error
    from keepsake.pipeline.cli.context import get_resolver
    from keepsake.validators.frontmatter import (
        FrontmatterValidator,
        format_frontmatter_report,
    )

    try:
        resolver = get_resolver(ctx, collection)
    except Exception as e:
        handle_cli_error(ctx, e, "validate_frontmatter", {"collection": collection})

    logger = ctx.obj["logger"]
    validator = FrontmatterValidator(resolver, logger)

    if file_path:
        # Validate single file
        issues = validator.validate_file(Path(file_path))
        if not issues:
            click.echo("✅ No frontmatter issues found")
            return
        for issue in issues:
            icon = "❌" if issue.severity == "error" else "⚠️"
            click.echo(f"{icon} [{issue.field_name}] {issue.message}")
            if issue.suggestion:
                click.echo(f"   💡 {issue.suggestion}")
        errors = sum(1 for i in issues if i.severity == "error")
        if errors:
            raise click.ClickException(f"Found {errors} frontmatter error(s)")
        return

    click.echo(f"🔍 Validating {collection} frontmatter in {resolver.config.root}\n")
    report = validator.validate_all()
    click.echo(format_frontmatter_report(report))

    if report.has_errors:
        raise click.ClickException(f"Found {report.total_errors} frontmatter error(s)")


if __name__ == "__main__":
    cli(obj={})
