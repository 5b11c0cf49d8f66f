"""
CardCatalog Top Level Object
"""
import abc
from typing import Any, Dict, Iterable

from ..utils import to_camel_case


class JsonObject(abc.ABC):
    """
    Base for every object that ends up in a catalog artifact
    """

    def build_keys_to_skip(self) -> Iterable[str]:
        """
        Determine what keys should be avoided in the JSON dump
        :return Keys to avoid
        """
        return set()

    def to_json(self) -> Dict[str, Any]:
        """
        Support orjson.dumps(default=...)
        :return: JSON serializable dictionary
        """
        skip_keys = set(self.build_keys_to_skip())

        return {
            to_camel_case(key): (
                value.to_json() if isinstance(value, JsonObject) else value
            )
            for key, value in vars(self).items()
            if not key.startswith("_") and key not in skip_keys
        }
