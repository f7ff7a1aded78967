"""Plain-text sequent format handler."""

from pathlib import Path

from gentzen.core.logic import Claim
from .sequent_parser.parser import read_file, read_string
from .base import FileFormat


class SequentFormat(FileFormat):
    """Handler for claims written as `p & q => q & p`."""

    def parse_file(self, file_path: Path) -> Claim:
        return read_file(str(file_path))

    def parse_string(self, content: str) -> Claim:
        return read_string(content)

    def format_claim(self, claim: Claim) -> str:
        return f"{claim}\n"

    @property
    def name(self) -> str:
        return "sequent"

    @property
    def extensions(self) -> list[str]:
        return ['.seq', '.sequent', '.txt']
