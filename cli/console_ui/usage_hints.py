import typer
from settings import DEFAULT_CLI_NAME, DEFAULT_MANIFEST_NAME


def hint_manifest_format() -> None:
    """
    Print a short reminder of the manifest line format.
    """
    typer.echo("Each manifest line must hold an MD5 checksum and a file path, for example:", err=True)
    typer.echo(f"{' '*4}d41d8cd98f00b204e9800998ecf8427e  path/to/file.txt", err=True)
    typer.echo("Blank lines and lines starting with '#' are ignored.", err=True)


def hint_generate_manifest() -> None:
    typer.echo("Run the following command to create a manifest for a directory:", err=True)
    typer.echo(f"{' '*4}{DEFAULT_CLI_NAME} generate <directory> --output <directory>/{DEFAULT_MANIFEST_NAME}", err=True)


def hint_check_file_permissions() -> None:
    typer.echo(
        "Tip: make sure the file exists and that the current user is allowed to read it.",
        err=True,
    )
