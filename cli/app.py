import typer

from settings import (
    VERSION,
    DEFAULT_CLI_NAME,
)

from cli.commands import verify
from cli.console_ui import banners

app = typer.Typer(
    name= f"{DEFAULT_CLI_NAME}",
    help= (
        f"{DEFAULT_CLI_NAME} — Verifies files against expected MD5 checksums.\n\n"
        f"{DEFAULT_CLI_NAME} will return 0 for matches, 0x01 for mismatch, and 0x10 for other errors."
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("file")(verify.verify_file_command)
app.command("manifest")(verify.verify_manifest_command)
app.command("generate")(verify.generate_manifest_command)


@app.command("about", help="Show program information")
def about() -> None:
    banners.display_general_info_banner()


@app.callback(invoke_without_command=True)
def global_options(ctx: typer.Context, version: bool = False):
    if version:
        typer.echo(f"{DEFAULT_CLI_NAME} version {VERSION}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        # If they ran just `chkr` with no command, print the top-level help
        typer.echo(ctx.get_help())
