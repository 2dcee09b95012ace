"""JSON storage helpers and name formatting."""

import json
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('sweepstake.utils')


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Read a JSON file, validating it against a pydantic schema when given.

    Args:
        path: File to read
        schema: Optional model, e.g. GameFile or PlayersFile

    Returns:
        The parsed JSON, or the validated model instance

    Raises:
        FileNotFoundError: If the file is missing
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the data does not match ``schema``
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f'File not found: {path}')

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        logger.error(f'{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}')
        raise

    if schema is None:
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'{path} does not match {schema.__name__}: {e.error_count()} error(s)')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def save_json(path: Path | str, data: Any, indent: int = 2) -> None:
    """
    Write ``data`` as JSON, replacing the file in one step.

    The text goes to a sibling ``.tmp`` file first and is then moved over
    ``path``, so an interrupted save leaves the previous game intact.
    Missing parent directories are created.

    Args:
        path: Destination file
        data: JSON-serializable value or pydantic model
        indent: Indentation width

    Raises:
        TypeError: If ``data`` cannot be serialized
        OSError: If the file cannot be written
    """
    path = Path(path)
    if isinstance(data, BaseModel):
        data = data.model_dump()
    text = json.dumps(data, indent=indent, ensure_ascii=False)

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + '.tmp')
    tmp_path.write_text(text, encoding='utf-8')
    os.replace(tmp_path, path)
    logger.debug(f'Saved {path}')


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_title_case(text: str) -> str:
    """
    Title-case a person's name, word by word.

    Apostrophes and hyphens start a new capitalized part, so
    "o'connor" becomes "O'Connor" and "mary-jane" becomes "Mary-Jane".
    Runs of whitespace collapse to single spaces.

    Args:
        text: Raw name text

    Returns:
        Title-cased name
    """
    words = []
    for word in text.split():
        if "'" in word:
            words.append("'".join(_capitalize(part) for part in word.split("'")))
        elif '-' in word:
            words.append('-'.join(_capitalize(part) for part in word.split('-')))
        else:
            words.append(_capitalize(word))
    return ' '.join(words)
