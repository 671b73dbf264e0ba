import pyfiglet

from rich import box
from rich.console import Console, Group
from rich.table import Table
from rich.text import Text
from rich.align import Align
from rich.panel import Panel

from settings import VERSION, DEFAULT_CLI_NAME


def display_general_info_banner() -> None:
    """
    Render the program name in ASCII art above a panel with program info.
    """
    console = Console()

    program_name_tittle = Text.from_ansi(pyfiglet.figlet_format(DEFAULT_CLI_NAME, font="standard"))

    row_format = "[bold dodger_blue2]{key}:[/] [bold bright_white]{value}[/]"
    info = Table.grid(padding=1)
    info.add_column(justify="left", style="bold dodger_blue2", max_width=70)
    info.add_row(row_format.format(key="Version", value=VERSION))
    info.add_row(row_format.format(
        key="Description",
        value="Verifies file integrity against expected MD5 checksums, one file or a whole manifest."
        )
    )
    info.add_row(row_format.format(
        key="Exit codes",
        value="0 for matches, 0x01 for mismatch, 0x10 for other errors"
        )
    )

    info_panel = Panel(
        Align(info, align="left", vertical="middle"),
        box= box.SQUARE,
        border_style="cyan",
        padding=(0, 1), # (top & bottom, left & right)
    )

    console.print(Group(program_name_tittle, info_panel))
