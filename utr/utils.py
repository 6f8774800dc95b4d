"""Utility functions for file I/O, query escaping and dates."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from .constants import DATE_DISPLAY_FORMAT, DATE_INPUT_FORMAT

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('utr.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with optional schema validation.

    Args:
        path: Path to JSON file (str or Path object)
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from utr.schemas import AppConfig
        config = load_json('~/.config/utr/config.json', schema=AppConfig)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        logger.debug(f'Successfully loaded JSON from: {path}')
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        try:
            validated = schema.model_validate(data)
            logger.debug(f'Schema validation passed for: {path}')
            return validated
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    return data


def quote_query(text: str) -> str:
    """
    Percent-escape a search string for use in a URL.

    Every reserved character is escaped, including '/' and '&', so the
    result can be appended to a query string as-is.

    Example:
        quote_query('Roger Federer')  # 'Roger%20Federer'
    """
    return quote(text, safe='')


def format_date(value: str) -> str:
    """
    Reformat an upstream timestamp to a short display date.

    A malformed value is logged and rendered as an empty string.

    Example:
        format_date('2023-06-10T00:00:00')  # '06/10/2023'
    """
    try:
        return datetime.strptime(value, DATE_INPUT_FORMAT).strftime(DATE_DISPLAY_FORMAT)
    except (TypeError, ValueError) as e:
        logger.warning(f'Could not parse date {value!r}: {e}')
        return ''
