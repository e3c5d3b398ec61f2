"""Atomic persistence of the generated table module."""

import logging
import os
import tempfile
from pathlib import Path

from mimedesc.constants import OUTPUT_FILE_MODE
from mimedesc.errors import WriteError

logger = logging.getLogger(__name__)


def write_module(text: str, output_path: Path) -> Path:
    """
    Write text to output_path, replacing any existing file.

    The text goes to a temporary file in the destination directory which is
    then renamed over the target, so a failed write leaves the previous file
    untouched.

    Raises:
        WriteError: On any I/O failure.
    """
    output_path = Path(output_path)
    tmp = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
        )
        tmp = Path(tmp_name)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp, OUTPUT_FILE_MODE)
        os.replace(tmp, output_path)
    except OSError as exc:
        raise WriteError(f"failed to write output file {output_path}: {exc}") from exc
    finally:
        if tmp is not None and tmp.exists():
            tmp.unlink()

    logger.info(f"Wrote {output_path}")
    return output_path
