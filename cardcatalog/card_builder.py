"""
CardCatalog Card Builder

Converts one Scryfall printing into one or two catalog card records.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from . import constants
from .classes import CatalogCardObject, CatalogPricesObject
from .popularity import PopularityLookups
from .utils import normalize_name

LOGGER = logging.getLogger(__name__)


@dataclass
class CardBuildContext:
    """Context for building a single catalog record."""

    scryfall: Dict[str, Any]
    is_secondary: bool = False

    @property
    def faces(self) -> List[Dict[str, Any]]:
        """All faces on the printing, empty for single-faced cards."""
        return self.scryfall.get("card_faces") or []

    @property
    def is_multi_face(self) -> bool:
        """Check if this printing has faces."""
        return bool(self.faces)

    @property
    def layout(self) -> str:
        return self.scryfall.get("layout") or ""

    @property
    def face_data(self) -> Dict[str, Any]:
        """Get the face attribute source for this record."""
        return get_face_attribute_source(self.scryfall, self.is_secondary)


def has_secondary_face(scryfall_object: Dict[str, Any]) -> bool:
    """
    Does this printing get a second catalog record for its back face.
    Split, flip and adventure cards share one card frame and stay whole.
    :param scryfall_object: Scryfall printing
    :return: Should a secondary record be built
    """
    faces = scryfall_object.get("card_faces") or []
    return (
        len(faces) >= 2
        and scryfall_object.get("layout") not in constants.PRINTING_LEVEL_LAYOUTS
    )


def get_face_attribute_source(
    scryfall_object: Dict[str, Any], is_secondary: bool = False
) -> Dict[str, Any]:
    """
    Pick the object that face specific attributes are read from
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :return: Back face, front face, or the printing itself
    """
    faces = scryfall_object.get("card_faces") or []
    if is_secondary:
        return faces[1]
    if faces:
        return faces[0]
    return scryfall_object


def convert_id(scryfall_object: Dict[str, Any], is_secondary: bool = False) -> str:
    if is_secondary:
        return f"{scryfall_object['id']}{constants.SECONDARY_ID_SUFFIX}"
    return str(scryfall_object["id"])


def convert_name(scryfall_object: Dict[str, Any], is_secondary: bool = False) -> str:
    """
    Get the name this record is catalogued under.
    Split cards keep both halves, other multi-face cards use one side.
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :return: Record name
    """
    name: str = scryfall_object.get("name") or ""

    if is_secondary:
        name = name.split("//", 1)[-1]
    elif "//" in name and scryfall_object.get("layout") != "split":
        name = name.split("//", 1)[0]

    return name.strip()


def convert_cmc(
    scryfall_object: Dict[str, Any],
    is_secondary: bool = False,
    face_attribute_source: Optional[Dict[str, Any]] = None,
) -> float:
    """
    Back faces are free, everything else uses the face value when it has one
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :param face_attribute_source: Face to read from
    :return: Mana value
    """
    if is_secondary:
        return 0

    face = face_attribute_source or scryfall_object
    face_cmc = face.get("cmc")
    if isinstance(face_cmc, (int, float)) and not isinstance(face_cmc, bool):
        return face_cmc
    return scryfall_object.get("cmc") or 0


def convert_legalities(
    scryfall_object: Dict[str, Any], is_secondary: bool = False
) -> Dict[str, str]:
    """
    Given Scryfall legalities, shape them into the fixed catalog formats
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :return: Format name -> legal/not_legal/restricted/banned
    """
    if is_secondary:
        return {game_format: constants.NOT_LEGAL for game_format in constants.LEGALITY_FORMATS}

    sf_legalities = scryfall_object.get("legalities")
    if not isinstance(sf_legalities, dict):
        sf_legalities = {}

    return {
        game_format: sf_legalities.get(game_format.lower()) or constants.NOT_LEGAL
        for game_format in constants.LEGALITY_FORMATS
    }


def tokenize_mana_cost(mana_cost: str) -> List[str]:
    """
    Break "{2}{W/U}{G}" into its symbols, last symbol first,
    lowercase with hybrid halves joined by "-"
    :param mana_cost: Mana cost string
    :return: Parsed cost
    """
    mana_cost = mana_cost.strip()
    if not mana_cost:
        return []

    symbols = mana_cost[1:-1].lower().split("}{")
    return [symbol.replace("/", "-") for symbol in reversed(symbols)]


def convert_parsed_cost(
    scryfall_object: Dict[str, Any], is_secondary: bool = False
) -> List[str]:
    """
    Get the parsed cost, taking the cost from wherever the layout stores it
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :return: Parsed cost
    """
    if is_secondary:
        return []

    faces = scryfall_object.get("card_faces")
    layout = scryfall_object.get("layout")

    if not faces or layout == "flip":
        return tokenize_mana_cost(scryfall_object.get("mana_cost") or "")

    if layout in constants.SPLICED_COST_LAYOUTS:
        spliced = (scryfall_object.get("mana_cost") or "").replace(
            constants.FACE_SEPARATOR, "{split}"
        )
        return tokenize_mana_cost(spliced)

    if "mana_cost" in faces[0]:
        return tokenize_mana_cost(faces[0].get("mana_cost") or "")

    LOGGER.error(
        f"Error converting parsed cost: (secondary:{is_secondary}) "
        f"{scryfall_object.get('name')}"
    )
    return []


def convert_colors(
    scryfall_object: Dict[str, Any], is_secondary: bool = False
) -> List[str]:
    """
    Get the colors for a record. Flip, split and adventure cards only
    carry colors on the printing, not on their faces.
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :return: Colors
    """
    faces = scryfall_object.get("card_faces") or []
    layout = scryfall_object.get("layout")

    if is_secondary:
        if len(faces) < 2:
            return []
        if layout == "adventure":
            return list(scryfall_object.get("colors") or [])
        if "colors" in faces[1]:
            return list(faces[1].get("colors") or [])
    elif not faces or layout in constants.PRINTING_LEVEL_LAYOUTS:
        return list(scryfall_object.get("colors") or [])
    elif "colors" in faces[0]:
        return list(faces[0].get("colors") or [])

    LOGGER.error(
        f"Error converting colors: (secondary:{is_secondary}) "
        f"{scryfall_object.get('name')}"
    )
    return []


def convert_type(
    scryfall_object: Dict[str, Any],
    is_secondary: bool = False,
    face_attribute_source: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Get the type line for a record, falling back to the matching half
    of the printing's combined type line
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :param face_attribute_source: Face to read from
    :return: Type line
    """
    face = face_attribute_source or scryfall_object
    card_type: str = face.get("type_line") or ""

    if not card_type:
        card_type = scryfall_object.get("type_line") or ""
        if is_secondary:
            card_type = card_type.split("//", 1)[-1]
        elif "//" in card_type:
            card_type = card_type.split("//", 1)[0]

    if card_type == "Artifact — Contraption":
        card_type = "Artifact Contraption"

    card_type = card_type.strip()
    if not card_type:
        LOGGER.error(
            f"Error converting type: (secondary:{is_secondary}) "
            f"{scryfall_object.get('name')} (id: {scryfall_object.get('id')})"
        )
    return card_type


def convert_oracle_text(
    scryfall_object: Dict[str, Any], is_secondary: bool = False
) -> Optional[str]:
    """
    Get searchable rules text. Multi-face printings join every face's text.
    :param scryfall_object: Scryfall printing
    :param is_secondary: Building the back face record
    :return: Rules text
    """
    faces = scryfall_object.get("card_faces")
    if is_secondary:
        return get_face_attribute_source(scryfall_object, True).get("oracle_text") or ""
    if not faces:
        return scryfall_object.get("oracle_text")
    return "\n".join(face.get("oracle_text") or "" for face in faces)


def is_promo(scryfall_object: Dict[str, Any]) -> bool:
    """
    Promotional printings, plus alternate frames & masterpiece sets
    that should never be the default image for a card
    :param scryfall_object: Scryfall printing
    :return: Is this a promo
    """
    frame_effects = set(scryfall_object.get("frame_effects") or [])
    return bool(
        scryfall_object.get("promo")
        or frame_effects.intersection(constants.PROMO_FRAME_EFFECTS)
        or scryfall_object.get("textless")
        or scryfall_object.get("frame") == "art_series"
        or scryfall_object.get("layout") == "art_series"
        or (scryfall_object.get("set") or "").lower()
        in constants.MASTERPIECE_SET_CODES
    )


def convert_color_category(card_type: str, color_identity: List[str]) -> str:
    """
    Single character bucket used to sort cards
    :param card_type: Type line
    :param color_identity: Color identity
    :return: l, c, m, or the lowercase color letter
    """
    if "land" in card_type.lower():
        return "l"
    if not color_identity:
        return "c"
    if len(color_identity) > 1:
        return "m"
    return color_identity[0].lower()


def build_full_name(name: str, set_code: str, collector_number: str) -> str:
    return f"{name} [{set_code}-{collector_number}]"


def _set_printing_info(card: CatalogCardObject, ctx: CardBuildContext) -> None:
    """Set attributes shared by every face of the printing."""
    sf = ctx.scryfall

    card.set_code = sf.get("set") or ""
    card.set_name = sf.get("set_name") or ""
    card.collector_number = sf.get("collector_number") or ""
    card.released_at = sf.get("released_at") or ""
    card.reprint = bool(sf.get("reprint"))
    card.promo = is_promo(sf)
    card.digital = bool(sf.get("digital"))
    card.finishes = list(sf.get("finishes") or [])
    card.border_color = sf.get("border_color") or ""
    card.full_art = bool(sf.get("full_art"))
    card.language = sf.get("lang") or ""
    card.rarity = sf.get("rarity") or ""
    card.artist = sf.get("artist")
    card.scryfall_uri = sf.get("scryfall_uri")
    card.layout = ctx.layout
    card.is_token = ctx.layout == "token"
    card.mtgo_id = sf.get("mtgo_id")
    card.tcgplayer_id = sf.get("tcgplayer_id")
    card.prices = CatalogPricesObject(sf.get("prices"))
    card.color_identity = list(sf.get("color_identity") or [])


def _set_face_attributes(card: CatalogCardObject, ctx: CardBuildContext) -> None:
    """Set identity & gameplay attributes for this face."""
    sf = ctx.scryfall
    face = ctx.face_data

    card.id = convert_id(sf, ctx.is_secondary)
    # Reversible cards have a separate Oracle ID on each face
    card.oracle_id = face.get("oracle_id") or sf.get("oracle_id")
    card.name = convert_name(sf, ctx.is_secondary)
    card.name_lower = normalize_name(card.name)
    card.full_name = build_full_name(
        card.name, card.set_code, card.collector_number
    )

    card.cmc = convert_cmc(sf, ctx.is_secondary, face)
    card.legalities = convert_legalities(sf, ctx.is_secondary)
    card.parsed_cost = convert_parsed_cost(sf, ctx.is_secondary)
    card.colors = convert_colors(sf, ctx.is_secondary)
    card.type = convert_type(sf, ctx.is_secondary, face)
    card.oracle_text = convert_oracle_text(sf, ctx.is_secondary)

    card.loyalty = face.get("loyalty") or None
    card.power = face.get("power") or None
    card.toughness = face.get("toughness") or None
    card.colorcategory = convert_color_category(card.type, card.color_identity)


def _set_images(card: CatalogCardObject, ctx: CardBuildContext) -> None:
    """Set image URIs, face images win over printing images."""
    sf = ctx.scryfall
    image_uris = ctx.face_data.get("image_uris") or sf.get("image_uris")

    if image_uris:
        card.image_small = image_uris.get("small")
        card.image_normal = image_uris.get("normal")
        card.art_crop = image_uris.get("art_crop")

    faces = ctx.faces
    if not ctx.is_secondary and len(faces) >= 2 and faces[1].get("image_uris"):
        card.image_flip = faces[1]["image_uris"].get("normal")


def _set_popularity(
    card: CatalogCardObject, lookups: Optional[PopularityLookups]
) -> None:
    """Attach Elo, embedding and cube history."""
    if lookups is None:
        return

    card.elo = lookups.get_elo(card.name)
    card.embedding = lookups.get_embedding(card.name)

    history = lookups.get_history(card.oracle_id)
    if history is not None:
        card.popularity = round(history.popularity_fraction, 4) * 100
        card.cube_count = history.cube_count
        card.pick_count = history.picks or 0


def build_catalog_card(
    scryfall_object: Dict[str, Any],
    is_secondary: bool = False,
    lookups: Optional[PopularityLookups] = None,
) -> CatalogCardObject:
    """
    Build one catalog record from a Scryfall printing
    :param scryfall_object: Scryfall printing
    :param is_secondary: Build the back face record
    :param lookups: Popularity data to enrich the record with
    :return: Catalog record, without token links
    """
    ctx = CardBuildContext(scryfall=scryfall_object, is_secondary=is_secondary)

    card = CatalogCardObject()
    _set_printing_info(card, ctx)
    _set_face_attributes(card, ctx)
    _set_images(card, ctx)
    _set_popularity(card, lookups)

    return card


def build_catalog_cards(
    scryfall_object: Dict[str, Any], lookups: Optional[PopularityLookups] = None
) -> List[CatalogCardObject]:
    """
    Build every catalog record for a printing. The back face record,
    when there is one, comes first.
    :param scryfall_object: Scryfall printing
    :param lookups: Popularity data to enrich the records with
    :return: One or two catalog records
    """
    LOGGER.debug(
        f"Building {(scryfall_object.get('set') or '').upper()}: "
        f"{scryfall_object.get('name')}"
    )

    results = []
    if has_secondary_face(scryfall_object):
        results.append(build_catalog_card(scryfall_object, True, lookups))
    results.append(build_catalog_card(scryfall_object, False, lookups))
    return results
