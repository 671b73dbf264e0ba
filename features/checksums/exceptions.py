class ManifestParseError(ValueError):
    """
    Raised when a checksum manifest can not be turned into a list of entries.

    A malformed line fails the whole manifest; no line is skipped silently.

    Attributes
    ----------
    manifest_path : str
        Path of the manifest being parsed.
    line_number : int | None
        1-based number of the offending line; None when the manifest as a whole is at fault.
    line : str | None
        Content of the offending line, without its line terminator.
    reason : str
        Short description of what is wrong.
    """

    def __init__(
        self,
        reason: str,
        *,
        manifest_path: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.reason = reason
        self.manifest_path = manifest_path
        self.line_number = line_number
        self.line = line

        super().__init__(reason)

    def __str__(self) -> str:
        if self.line_number is None:
            return f"{self.manifest_path}: {self.reason}"

        return f"{self.manifest_path}, line {self.line_number}: {self.reason}\n    {self.line!r}"


class ManifestReadError(ManifestParseError):
    """Raised when the manifest file itself is missing, unreadable or not text."""
    pass
