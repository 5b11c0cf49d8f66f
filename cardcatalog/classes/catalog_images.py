"""
CardCatalog image lookup objects
"""

from typing import Iterable, Optional

from .json_object import JsonObject


class CatalogImageObject(JsonObject):
    """
    Art crop descriptor stored per full name
    """

    uri: Optional[str]
    artist: Optional[str]
    id: str

    def __init__(self, uri: Optional[str], artist: Optional[str], card_id: str):
        self.uri = uri
        self.artist = artist
        self.id = card_id


class CatalogCardImagesObject(JsonObject):
    """
    Display images stored per plain name
    """

    image_normal: Optional[str]
    image_flip: Optional[str]

    def __init__(self, image_normal: Optional[str], image_flip: Optional[str] = None):
        self.image_normal = image_normal
        self.image_flip = image_flip

    def build_keys_to_skip(self) -> Iterable[str]:
        return set() if self.image_flip else {"image_flip"}
