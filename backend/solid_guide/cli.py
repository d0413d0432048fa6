"""Command line entry point for browsing lessons and running their demos."""

from __future__ import annotations

import logging
from typing import Optional

import click

from .core import config
from .core.exceptions import ExampleNotFoundError, LessonNotFoundError
from .core.logging_config import setup_logging
from .domain.entities import EXAMPLE_KINDS
from .services.lesson_service import LessonService, build_lesson_service

logger = logging.getLogger(__name__)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Browse the SOLID lessons and run their violation/compliance demos."""
    setup_logging(
        log_level=config.get_log_level(),
        log_to_file=config.get_log_to_file(),
        use_json_format=config.get_log_json(),
        log_dir=config.get_log_dir(),
    )
    # Tests may inject a service through ctx.obj
    if ctx.obj is None:
        ctx.obj = build_lesson_service()


@cli.command("list")
@click.pass_obj
def list_lessons(service: LessonService) -> None:
    """List every lesson in SOLID order."""
    for lesson in service.list_lessons():
        click.echo(f"{lesson.code.upper()}  {lesson.principle} - {lesson.summary}")


@cli.command("show")
@click.argument("code")
@click.pass_obj
def show_lesson(service: LessonService, code: str) -> None:
    """Print the markdown of lesson CODE."""
    try:
        lesson = service.get_lesson(code)
    except LessonNotFoundError as e:
        raise click.ClickException(str(e))
    click.echo(lesson.body)


@cli.command("run")
@click.argument("code")
@click.option(
    "--kind",
    type=click.Choice(EXAMPLE_KINDS + ("both",), case_sensitive=False),
    default="both",
    show_default=True,
    help="Which demo to run.",
)
@click.pass_obj
def run_example(service: LessonService, code: str, kind: str) -> None:
    """Run the demo(s) of lesson CODE and print their console output."""
    kinds = EXAMPLE_KINDS if kind.lower() == "both" else (kind.lower(),)
    failed = False
    for example_kind in kinds:
        try:
            run = service.run_example(code, example_kind)
        except (LessonNotFoundError, ExampleNotFoundError) as e:
            raise click.ClickException(str(e))
        click.echo(f"--- {example_kind} ---")
        click.echo(run.output, nl=False)
        if not run.succeeded:
            click.echo(f"Example failed: {run.error}", err=True)
            failed = True
    if failed:
        raise click.ClickException("One or more examples failed")


@cli.command("serve")
@click.option("--host", default=None, help="Bind address. Overrides HOST.")
@click.option("--port", default=None, type=int, help="Port. Overrides PORT.")
@click.option("--debug/--no-debug", default=False)
def serve(host: Optional[str], port: Optional[int], debug: bool) -> None:
    """Serve the lessons as JSON over HTTP."""
    from .main import create_app

    app = create_app()
    app.run(
        host=host or app.config["HOST"],
        port=port or app.config["PORT"],
        debug=debug,
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
