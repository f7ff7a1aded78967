"""Base class for file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from gentzen.core.logic import Claim


class FileFormat(ABC):
    """Abstract base class for file format handlers.

    File format handlers are responsible for:
    1. Parsing files holding a single claim
    2. Converting parsed content to Claim objects
    3. Writing Claim objects back to files
    """

    @abstractmethod
    def parse_file(self, file_path: Path, **kwargs) -> Claim:
        """Parse a file and return a Claim object.

        Args:
            file_path: Path to the file to parse
            **kwargs: Additional format-specific options

        Returns:
            The claim stored in the file

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file content is invalid
        """
        pass

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> Claim:
        """Parse a string and return a Claim object.

        Raises:
            ValueError: If content is invalid
        """
        pass

    def write_file(self, claim: Claim, file_path: Path, **kwargs) -> None:
        """Write a Claim to a file."""
        with open(file_path, 'w') as f:
            f.write(self.format_claim(claim, **kwargs))

    @abstractmethod
    def format_claim(self, claim: Claim, **kwargs) -> str:
        """Format a Claim as a string that parse_string reads back."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this file format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> list[str]:
        """Return list of file extensions this format handles."""
        pass
