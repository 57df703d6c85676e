"""Loading scenario scripts from disk.

The parser and label compiler only ever see text; this module is the seam
where files are read.
"""

from __future__ import annotations

from pathlib import Path

from vnscript.config import get_logger
from vnscript.exceptions import ParseError, ScenarioFileNotFoundError
from vnscript.parser.line_classifier import split_script_lines

logger = get_logger(__name__)


def read_scenario_text(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a scenario file as text.

    Args:
        path: Path to the scenario file
        encoding: Text encoding of the file

    Returns:
        File content with a leading byte order mark removed

    Raises:
        ScenarioFileNotFoundError: If the file does not exist
        ParseError: If the file cannot be decoded with the given encoding
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ScenarioFileNotFoundError(
            message=f"Scenario file not found: {file_path}",
            hint="Check the path, or run from the directory containing the script.",
            details={"path": str(file_path.absolute())},
        )

    logger.debug("Reading scenario file", path=str(file_path), encoding=encoding)
    try:
        content = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ParseError(
            message=f"Could not decode scenario file: {file_path}",
            hint="Set script_encoding (e.g. VNSCRIPT_SCRIPT_ENCODING=shift_jis).",
            details={"path": str(file_path), "encoding": encoding, "error": str(e)},
        ) from e
    return content.removeprefix("\ufeff")


def read_scenario_lines(
    path: Path | str,
    start: int,
    end: int | None = None,
    encoding: str = "utf-8",
) -> list[str]:
    """Read an inclusive, 1-based range of lines from a scenario file."""
    lines = split_script_lines(read_scenario_text(path, encoding))
    return lines[start - 1 : end]
