"""
Ratings & cube history list readers
"""

import logging
import pathlib
from typing import Any, List, Optional, Type, TypeVar

import orjson
import pydantic

from ..errors import SourceUnavailableError
from ..models import CardHistory, CardRating

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def _read_json_list(path: pathlib.Path) -> List[Any]:
    path = pathlib.Path(path).expanduser()
    try:
        content = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as error:
        raise SourceUnavailableError(str(path), f"Unable to read: {error}") from error

    if not isinstance(content, list):
        raise SourceUnavailableError(str(path), "Expected a JSON list")
    return content


def parse_entries(entries: List[Any], model: Type[ModelT]) -> List[ModelT]:
    """
    Validate raw entries, skipping the ones that don't fit the model
    :param entries: Raw JSON objects
    :param model: Pydantic model to validate against
    :return: Valid entries
    """
    parsed = []
    for entry in entries:
        try:
            parsed.append(model.model_validate(entry))
        except pydantic.ValidationError as error:
            LOGGER.warning(f"Skipping invalid {model.__name__} entry: {error}")
    return parsed


def load_ratings(path: Optional[pathlib.Path]) -> List[CardRating]:
    """
    Load Elo ratings & embeddings
    :param path: JSON list of {name, elo, embedding}
    :return: Ratings, empty if no path was given
    """
    if path is None:
        return []
    return parse_entries(_read_json_list(path), CardRating)


def load_histories(path: Optional[pathlib.Path]) -> List[CardHistory]:
    """
    Load cube inclusion histories
    :param path: JSON list of {oracleId, current: {total, picks}}
    :return: Histories, empty if no path was given
    """
    if path is None:
        return []
    return parse_entries(_read_json_list(path), CardHistory)
