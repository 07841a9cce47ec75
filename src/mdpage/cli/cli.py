"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpage.cli.commands import render_cmd, toc_cmd, welcome_cmd


app = typer.Typer(name="mdpage", no_args_is_help=True, help="Render Markdown into navigable HTML pages")

app.command(name="render")(render_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="welcome")(welcome_cmd)
