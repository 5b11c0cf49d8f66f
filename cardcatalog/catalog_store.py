"""
CardCatalog in-memory store & lookup indices
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from . import constants
from .classes import CatalogCardImagesObject, CatalogCardObject, CatalogImageObject
from .language_mapper import add_language_link
from .models import CardHistory, CardRating
from .popularity import PopularityLookups
from .utils import binary_insert, normalize_name, turn_to_tree

LOGGER = logging.getLogger(__name__)

PresentableFilter = Callable[[CatalogCardObject], bool]


def reasonable_card(card: CatalogCardObject) -> bool:
    """
    Should this printing be allowed to supply the display image for its name
    :param card: Catalog record
    :return: Is it a plain, paper, English printing
    """
    return (
        not card.promo
        and not card.digital
        and not card.is_token
        and card.border_color != "gold"
        and card.language == "en"
        and bool(card.tcgplayer_id)
        and card.set_code not in constants.UNPRESENTABLE_SET_CODES
        and "★" not in card.collector_number
    )


class CatalogStore:
    """
    Every catalog record plus the indices built over them. Records are only
    ever added, never changed or removed, and insertion order matters: the
    first id stored for a name is that name's default printing.
    """

    card_dict: Dict[str, CatalogCardObject]
    name_to_id: Dict[str, List[str]]
    oracle_to_id: Dict[str, List[str]]
    english: Dict[str, str]
    names: List[str]
    full_names: List[str]
    image_dict: Dict[str, CatalogImageObject]
    card_images: Dict[str, CatalogCardImagesObject]
    popularity: PopularityLookups
    presentable: PresentableFilter

    def __init__(self, presentable: Optional[PresentableFilter] = None) -> None:
        self.card_dict = {}
        self.name_to_id = {}
        self.oracle_to_id = {}
        self.english = {}
        self.names = []
        self.full_names = []
        self.image_dict = {}
        self.card_images = {}
        self.popularity = PopularityLookups()
        self.presentable = presentable or reasonable_card

    def __len__(self) -> int:
        return len(self.card_dict)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self.card_dict

    def load_ratings(self, ratings: Iterable[CardRating]) -> None:
        self.popularity.load_ratings(ratings)

    def load_histories(self, histories: Iterable[CardHistory]) -> None:
        self.popularity.load_histories(histories)

    def add(self, card: CatalogCardObject, is_secondary: bool = False) -> None:
        """
        Store a record and index it
        :param card: Catalog record
        :param is_secondary: Record is the back face of a printing
        """
        self.card_dict[card.id] = card

        normalized_full_name = normalize_name(card.full_name)
        normalized_name = normalize_name(card.name)

        self.image_dict[normalized_full_name] = CatalogImageObject(
            card.art_crop, card.artist, card.id
        )

        if not is_secondary and self.presentable(card):
            self.card_images[normalized_name] = CatalogCardImagesObject(
                card.image_normal, card.image_flip
            )

        # First printing stored under a name becomes its default
        name_ids = self.name_to_id.setdefault(normalized_name, [])
        if card.id not in name_ids:
            name_ids.append(card.id)

        self.oracle_to_id.setdefault(card.oracle_id or "", []).append(card.id)

        binary_insert(normalized_name, self.names)
        binary_insert(normalized_full_name, self.full_names)

    def add_language_link(self, scryfall_object: Dict[str, Any]) -> Optional[str]:
        """
        Link a non-English printing to its English printing
        :param scryfall_object: Scryfall printing in any language
        :return: English id, if one was linked
        """
        return add_language_link(self, scryfall_object)

    def get_card(self, card_id: str) -> Optional[CatalogCardObject]:
        return self.card_dict.get(card_id)

    def get_cards_by_name(self, name: str) -> List[CatalogCardObject]:
        """
        All records sharing a name, default printing first
        :param name: Card name, in any case
        :return: Catalog records
        """
        return [
            self.card_dict[card_id]
            for card_id in self.name_to_id.get(normalize_name(name), [])
        ]

    def get_default_card(self, name: str) -> Optional[CatalogCardObject]:
        cards = self.get_cards_by_name(name)
        return cards[0] if cards else None

    def artifacts(self) -> Dict[str, Any]:
        """
        Every named view of the catalog that gets persisted
        :return: Artifact name -> serializable content
        """
        return {
            "names": self.names,
            "cardtree": turn_to_tree(self.names),
            "carddict": self.card_dict,
            "nameToId": self.name_to_id,
            "oracleToId": self.oracle_to_id,
            "english": self.english,
            "full_names": turn_to_tree(self.full_names),
            "imagedict": self.image_dict,
            "cardimages": self.card_images,
        }
