from enum import Enum, IntEnum
from typing import (
    Annotated,
    Literal,
    NamedTuple,
    Optional,
    Union,
)
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from features.checksums.digest import is_md5_hexdigest


class ExitCode(IntEnum):
    """Process exit codes, as documented in the CLI help."""
    OK = 0x00
    MISMATCH = 0x01
    ERROR = 0x10


class ChecksumEntry(BaseModel):
    """
    One (file path, expected checksum) pair read from a manifest.

    Attributes:
        file_path (str): Path exactly as written in the manifest.
        expected_checksum (str): 32 hexadecimal characters, case preserved.
        line_number (int | None): 1-based manifest line the entry came from.
    """
    model_config = ConfigDict(frozen=True)

    file_path: str = Field(min_length=1)
    expected_checksum: str
    line_number: Optional[int] = None

    @field_validator('expected_checksum')
    @classmethod
    def validate_md5_hexdigest(cls, value: str) -> str:
        if not is_md5_hexdigest(value):
            raise ValueError(
                f"checksum must be 32 hexadecimal characters, got {len(value)} character(s): {value!r}"
            )
        return value


class Match(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["match"] = "match"
    file_path: str


class Mismatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["mismatch"] = "mismatch"
    file_path: str
    expected: str
    actual: str


class ReadError(BaseModel):
    """The file could not be opened or read; *cause* holds the underlying error message."""
    model_config = ConfigDict(frozen=True)

    status: Literal["read_error"] = "read_error"
    file_path: str
    cause: str


VerificationOutcome = Annotated[
    Union[Match, Mismatch, ReadError],
    Field(discriminator="status"),
]


class OverallResult(Enum):
    ALL_MATCH = "all_match"
    ANY_MISMATCH = "any_mismatch"
    ANY_ERROR = "any_error"

    @property
    def exit_code(self) -> ExitCode:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    OverallResult.ALL_MATCH: ExitCode.OK,
    OverallResult.ANY_MISMATCH: ExitCode.MISMATCH,
    OverallResult.ANY_ERROR: ExitCode.ERROR,
}


class VerificationSummary(NamedTuple):
    total: int
    matched: int
    mismatched: int
    errors: int
    result: OverallResult
