"""
CardCatalog Singular Card Object
"""

from typing import Dict, Iterable, List, Optional

from .. import constants
from .catalog_prices import CatalogPricesObject
from .json_object import JsonObject


class CatalogCardObject(JsonObject):
    """
    CardCatalog Singular Card Object, one per face of a printing
    """

    # Identity
    id: str
    oracle_id: Optional[str]

    # Printing
    set_code: str
    set_name: str
    collector_number: str
    released_at: str
    reprint: bool
    promo: bool
    digital: bool
    finishes: List[str]
    border_color: str
    full_art: bool
    language: str
    rarity: str
    artist: Optional[str]
    scryfall_uri: Optional[str]
    layout: str
    is_token: bool
    mtgo_id: Optional[int]
    tcgplayer_id: Optional[int]
    prices: CatalogPricesObject

    # Gameplay
    name: str
    name_lower: str
    full_name: str
    cmc: float
    parsed_cost: List[str]
    color_identity: List[str]
    colors: List[str]
    type: str
    oracle_text: Optional[str]
    power: Optional[str]
    toughness: Optional[str]
    loyalty: Optional[str]
    colorcategory: str
    legalities: Dict[str, str]

    # Popularity
    elo: float
    embedding: List[float]
    popularity: float
    cube_count: int
    pick_count: int

    # Images
    image_small: Optional[str]
    image_normal: Optional[str]
    art_crop: Optional[str]
    image_flip: Optional[str]

    tokens: List[str]

    __skip_if_empty = {
        "tcgplayer_id",
        "power",
        "toughness",
        "loyalty",
        "image_flip",
        "tokens",
    }

    def __init__(self) -> None:
        """
        Initializer for CardCatalog Singular Card Object
        """
        self.oracle_id = None
        self.artist = None
        self.scryfall_uri = None
        self.mtgo_id = None
        self.tcgplayer_id = None
        self.prices = CatalogPricesObject()
        self.parsed_cost = []
        self.color_identity = []
        self.colors = []
        self.oracle_text = None
        self.power = None
        self.toughness = None
        self.loyalty = None
        self.legalities = {}
        self.elo = constants.DEFAULT_ELO
        self.embedding = [0.0] * constants.EMBEDDING_LENGTH
        self.popularity = 0
        self.cube_count = 0
        self.pick_count = 0
        self.image_small = None
        self.image_normal = None
        self.art_crop = None
        self.image_flip = None
        self.tokens = []

    def __repr__(self) -> str:
        return f"CatalogCardObject({self.full_name!r}, id={self.id!r})"

    def build_keys_to_skip(self) -> Iterable[str]:
        """
        Optional attributes are dropped instead of written as null
        :return Keys to avoid
        """
        return {key for key in self.__skip_if_empty if not getattr(self, key)}

    def has_text(self) -> bool:
        """
        :return: Does this card carry any rules text
        """
        return bool(self.oracle_text)
