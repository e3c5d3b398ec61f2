"""
Generator configuration for mimedesc.

This module defines the GeneratorConfig dataclass that captures the
configurable parameters of a generation run: where the XML database comes
from, where the table module is written, and how long a fetch may block.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from mimedesc.constants import (
    DB_URL,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TIMEOUT,
    ENV_OUTPUT,
    ENV_SOURCE,
    ENV_TIMEOUT,
)


@dataclass
class GeneratorConfig:
    """
    Configuration for the MIME description generator.

    Attributes:
        source: URL (http, https or file) or local path of the XML database.
        output_path: Path of the generated Python module.
        timeout: Seconds before an HTTP fetch is abandoned.
    """

    source: str = DB_URL
    output_path: Path = field(default_factory=lambda: DEFAULT_OUTPUT_PATH)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        """Normalize path and timeout types."""
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)

        self.source = str(self.source)
        self.timeout = float(self.timeout)
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "GeneratorConfig":
        """
        Create configuration from environment variables.

        A .env file is loaded first (without overriding variables already set
        in the process environment). Unset variables fall back to defaults.

        Args:
            env_file: Path to a .env file. If None, python-dotenv searches
                for one starting from the current working directory and
                walking up through its parents.

        Returns:
            GeneratorConfig populated from MIMEDESC_SOURCE, MIMEDESC_OUTPUT
            and MIMEDESC_TIMEOUT.
        """
        if env_file is None:
            env_file = find_dotenv(usecwd=True)
        if env_file:
            load_dotenv(dotenv_path=env_file, override=False)

        return cls(
            source=os.environ.get(ENV_SOURCE) or DB_URL,
            output_path=Path(os.environ.get(ENV_OUTPUT) or DEFAULT_OUTPUT_PATH),
            timeout=float(os.environ.get(ENV_TIMEOUT) or DEFAULT_TIMEOUT),
        )

    @classmethod
    def for_local_file(
        cls,
        xml_path: Union[str, Path],
        output_path: Union[str, Path] = DEFAULT_OUTPUT_PATH,
    ) -> "GeneratorConfig":
        """Create configuration that reads the database from a local file."""
        return cls(source=str(xml_path), output_path=Path(output_path))
