"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import get_cmd, search_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="Query an in-memory document store")

app.command(name="search")(search_cmd)
app.command(name="get")(get_cmd)
