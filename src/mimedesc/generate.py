#!/usr/bin/env python3
"""
Generate the MIME description table from the shared-mime-info database.

Fetches the freedesktop.org XML database, extracts every MIME type that has
a description, and writes them into mimedesc/data.py as a read-only mapping.

Usage:
    python -m mimedesc.generate [--source URL_OR_PATH] [--output PATH]
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from mimedesc.config import GeneratorConfig
from mimedesc.errors import GenerationError
from mimedesc.generation import (
    build_table,
    generation_timestamp,
    open_source,
    parse_mime_xml_with_result,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a successful generation run."""
    entries: int
    output_path: Path
    timestamp: str


# =============================================================================
# PIPELINE
# =============================================================================

def run_generator(config: GeneratorConfig) -> GenerationResult:
    """
    Run fetch -> parse -> render -> write.

    The run is all-or-nothing: any stage failure raises a GenerationError
    subclass before the output file is touched.
    """
    logger.info("Starting MIME description generator...")

    logger.info(f"Fetching data from {config.source}...")
    with open_source(config.source, timeout=config.timeout) as stream:
        logger.info("Parsing XML data...")
        extraction = parse_mime_xml_with_result(stream)
    logger.info(f"Successfully parsed {len(extraction.descriptions)} MIME descriptions.")

    timestamp = generation_timestamp()
    logger.info(f"Generating Python source file at {config.output_path}...")
    output_path = build_table(
        extraction.descriptions,
        config.output_path,
        timestamp=timestamp,
        source=config.source,
    )

    logger.info("Generator finished successfully.")
    return GenerationResult(
        entries=len(extraction.descriptions),
        output_path=output_path,
        timestamp=timestamp,
    )


# =============================================================================
# CLI
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate the MIME description table from shared-mime-info"
    )
    parser.add_argument(
        "--source",
        default=None,
        help="Database URL or local XML path (default: freedesktop.org master)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Path of the generated module (default: mimedesc/data.py)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file with MIMEDESC_* settings",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-element detail",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        env_config = GeneratorConfig.from_env(env_file=args.env_file)
        config = GeneratorConfig(
            source=args.source or env_config.source,
            output_path=Path(args.output) if args.output else env_config.output_path,
            timeout=args.timeout if args.timeout is not None else env_config.timeout,
        )
        result = run_generator(config)
    except (GenerationError, ValueError) as exc:
        logger.error(f"Generator failed: {exc}")
        return 1

    logger.info(f"{result.entries} MIME descriptions written to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
