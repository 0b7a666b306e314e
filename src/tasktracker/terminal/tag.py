# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tasktracker.service import tag as tag_service
from tasktracker.terminal.completion import complete_tag
from tasktracker.terminal.custom_typer import AliasedTyperGroup
from tasktracker.view.views.tag import tags_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_tags() -> None:
    """List known tags and how many tasks carry each."""
    tags_view(tag_service.tag_usage())


@app.command("suggest, s")
def suggest(
    prefix: Annotated[str, typer.Argument(help="start of a tag name")] = "",
) -> None:
    """Print known tags starting with a prefix, ignoring case."""
    for tag in tag_service.suggest_tags(prefix):
        typer.echo(tag)


@app.command("pick, p", no_args_is_help=True)
def pick(
    current: Annotated[str, typer.Argument(help="tag input typed so far")],
    tag: Annotated[str, typer.Argument(autocompletion=complete_tag)],
) -> None:
    """Print tag input with a picked tag merged in, ready for --tags."""
    picked = tag_service.find_tag(tag.strip()) or tag.strip()
    typer.echo(tag_service.append_tag(current, picked))


@app.command("sync")
def sync() -> None:
    """Forget tags that no task carries any more."""
    tag_service.sync_tags()
    tags_view(tag_service.tag_usage())
