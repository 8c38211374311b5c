import logging
import os
from typing import List, Optional

from relquery.core import RenderSettings, DEFAULT_SETTINGS
from relquery.core.models import Relation

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """
    Exception raised when a relation cannot be read from or written to a file.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)

    def __str__(self):
        return f"StorageError(path={self.path}): {super().__str__()}"


def read_csv(path: str, settings: Optional[RenderSettings] = None) -> Relation:
    """
    Load a relation from delimited text: the first line is the header and
    every following non-empty line is one row, zipped to the header by
    position. Values are split on the delimiter with no quoting support.
    """
    settings = settings or DEFAULT_SETTINGS
    try:
        with open(path, 'r', encoding=settings.encoding) as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise StorageError(path, f"Cannot read file: {e}") from e

    relation = Relation(settings=settings)
    if not lines:
        return relation

    fields = lines[0].split(settings.delimiter)
    rows: List[List[str]] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line:
            continue
        values = line.split(settings.delimiter)
        if len(values) < len(fields):
            raise StorageError(
                path,
                f"Line {line_number} has {len(values)} values, expected {len(fields)}",
            )
        rows.append(values)

    relation.load(fields, rows)
    logger.debug(f"Read {relation.row_count()} rows with {relation.field_count()} fields from {path}")
    return relation


def write_csv(relation: Relation, path: str, settings: Optional[RenderSettings] = None) -> None:
    """Write `relation` as delimited text, replacing any existing file."""
    settings = settings or relation.settings
    directory = os.path.dirname(path)
    if directory and not os.path.isdir(directory):
        raise StorageError(path, f"Directory does not exist: {directory}")

    try:
        with open(path, 'w', encoding=settings.encoding, newline='') as f:
            f.write(relation.to_csv())
    except OSError as e:
        raise StorageError(path, f"Cannot write file: {e}") from e

    logger.debug(f"Wrote {relation.row_count()} rows to {path}")
