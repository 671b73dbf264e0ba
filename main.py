import sys

from cli.app import app
from features.checksums.models import ExitCode

# Exit code typer uses after printing a usage error
USAGE_ERROR_EXIT_CODE = 2


def main() -> None:
    try:
        app()
    except SystemExit as e:
        # Usage errors exit with 0x10 like every other non-checksum failure.
        if e.code == USAGE_ERROR_EXIT_CODE:
            sys.exit(int(ExitCode.ERROR))
        raise


if __name__ == "__main__":
    main()
