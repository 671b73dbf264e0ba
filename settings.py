import os
from dotenv import load_dotenv

load_dotenv()

DEBUG: bool = os.getenv("DEBUG", "false").lower().strip() == "true"

# An empty CHKR_LOG_FILE disables the log file
LOG_FILE = os.getenv("CHKR_LOG_FILE", os.path.join(".", "chkr.log"))

LOG_FILE_MODE = os.getenv("CHKR_LOG_FILE_MODE", "a")


MD5_HEX_LENGTH = 32

MANIFEST_COMMENT_MARKER = "#"

# Fields are separated by ASCII whitespace only; other Unicode spaces belong to the path
MANIFEST_FIELD_WHITESPACE = " \t\r\n\f\v"

# md5sum -b writes "<hash> *<filepath>"
MANIFEST_BINARY_MARKER = "*"

# utf-8-sig also accepts manifests saved with a BOM
MANIFEST_ENCODING = "utf-8-sig"

DEFAULT_MANIFEST_NAME = "md5sum.txt"


DEFAULT_CLI_NAME = "chkr"

VERSION = "0.1.0"
