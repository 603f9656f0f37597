"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import count_cmd, get_cmd, search_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store: lookup and filtered search")

app.command(name="get")(get_cmd)
app.command(name="search")(search_cmd)
app.command(name="count")(count_cmd)
