"""
Source buffer for the Conjoint tokenizer.

Holds the fully decoded text of a source file. The buffer is read once and
never mutated; the lexer only indexes into it.

Author: xwest
"""

from dataclasses import dataclass


class SourceFileError(Exception):
    """Raised when a source file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to read file \"{path}\": {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class SourceFile:
    """An immutable sequence of code points together with its origin."""
    path: str
    content: str

    @property
    def length(self) -> int:
        return len(self.content)


def read_source_file(path: str, encoding: str = "utf-8") -> SourceFile:
    """
    Read and decode a source file.

    Args:
        path: Path to the source file
        encoding: Text encoding of the file

    Returns:
        SourceFile holding the decoded content, line endings untranslated

    Raises:
        SourceFileError: If the file cannot be opened or decoded
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SourceFileError(path, str(e)) from e

    return SourceFile(path, content)
