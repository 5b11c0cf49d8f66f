"""
CardCatalog Token Inference

Works out which token & emblem records a card creates. Curated tables and
Scryfall's related parts are trusted first, then the rules text is scanned
for token creation wording and matched against tokens in the catalog.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

from . import constants
from .classes import CatalogCardObject
from .utils import load_resource_json, normalize_name

if TYPE_CHECKING:
    from .catalog_store import CatalogStore

LOGGER = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(
    r"(?P<prefix>(?:(?P<legend_name>[A-Za-z ,]+), a (?P<legendary>legendary))|[Xa-z ]+)"
    r"(?: (?P<pt>[0-9X]+/[0-9X]+))?"
    r" (?P<colors>(?:red|colorless|green|white|black|blue| and )+)?"
    r"(?: ?(?P<subtypes>(?:[A-Z][a-z]+ )+|[a-z]+))?"
    r"(?P<supertypes>(?:legendary|artifact|creature|Aura|enchantment| )*)?"
    r"tokens?"
    r"(?P<copies> that are copies of)?"
    r"(?: named (?P<named>(?:[A-Z][a-z]+ ?|of ?)+(?:'s \w+)?)?)?"
    r'(?:(?: with |\. It has )?(?P<keywords>(?:(?P<quoted>".*")|[a-z]+| and )+)+)?'
    r"(?:.*(?P<copy_of>a copy of))?"
)
QUOTED_TEXT = re.compile(r' *"[^"]*" *')
REMINDER_TEXT = re.compile(r" *\([^)]*\) *")

TOKEN_TRIGGER = " token"
GENERIC_COPY_WORDING = "create a token that's a copy of a creature token you control."
VARIABLE_STATS_WORDING = "power and toughness are each equal"

# Rules text fragment -> universal token name
KEYWORD_TRIGGERS: Dict[str, str] = {
    "Ascend (": "City's Blessing",
    "poison counter": "Poison",
    "you become the monarch": "Monarch",
    "{E}": "Energy",
}


@dataclass
class TokenDescriptor:
    """What a single line of rules text says about the token it creates."""

    name: str
    power: Optional[str] = None
    toughness: Optional[str] = None
    colors: List[str] = field(default_factory=list)
    type_words: List[str] = field(default_factory=list)
    abilities: List[str] = field(default_factory=list)
    is_copy: bool = False


def _split_keywords(keywords: str) -> List[str]:
    """
    "flying and vigilance" -> ["flying", "vigilance"], quoted abilities dropped
    """
    keywords = QUOTED_TEXT.sub("", keywords.lower()).replace(" and ", ",")
    return [part.strip() for part in keywords.split(",") if part.strip()]


def _split_quoted(quoted: str) -> List[str]:
    return [part for part in quoted.lower().split('"') if part.strip()]


def _parse_colors(color_string: Optional[str]) -> List[str]:
    colors = []
    for word in (color_string or "").split():
        color = constants.COLOR_WORD_MAP.get(word.lower())
        if color:
            colors.append(color)
    return colors


def extract_token_descriptor(line: str) -> Optional[TokenDescriptor]:
    """
    Pull a token description out of one line of rules text
    :param line: Rules text line that mentions a token
    :return: Descriptor, or None if the line can't be read
    """
    match = TOKEN_PATTERN.search(line)
    if match is None:
        return None

    subtypes = (match.group("subtypes") or "").strip()
    supertypes = (match.group("supertypes") or "").strip()
    if match.group("legendary"):
        supertypes = f"legendary {supertypes}".strip()

    if match.group("named"):
        name = match.group("named").strip()
    elif match.group("legend_name"):
        name = match.group("legend_name")
    else:
        # Not specifically named, so the token goes by its type
        name = subtypes

    power = toughness = None
    if match.group("pt"):
        power, toughness = match.group("pt").replace("X", "*").split("/")
    elif VARIABLE_STATS_WORDING in line:
        power = toughness = "*"

    abilities = []
    if match.group("keywords"):
        abilities.extend(_split_keywords(match.group("keywords")))
    if match.group("quoted"):
        abilities.extend(_split_quoted(match.group("quoted")))

    return TokenDescriptor(
        name=name,
        power=power,
        toughness=toughness,
        colors=_parse_colors(match.group("colors") or match.group("prefix")),
        type_words=f"{supertypes} {subtypes}".lower().split(),
        abilities=abilities,
        is_copy=bool(match.group("copy_of") or match.group("copies")),
    )


def candidate_type_words(candidate: CatalogCardObject) -> List[str]:
    """
    "Token Creature — Spirit" -> ["creature", "spirit"]
    """
    words = [word for word in candidate.type.lower().split() if word != "—"]
    if words and words[0] == "token":
        words = words[1:]
    return words


def candidate_abilities(candidate: CatalogCardObject) -> List[str]:
    """
    Ability phrases of a token, reminder text removed
    """
    if not candidate.oracle_text:
        return []
    text = REMINDER_TEXT.sub("", candidate.oracle_text.lower())
    return [part.strip() for part in text.split(", ") if part.strip()]


CandidatePredicate = Callable[[CatalogCardObject, TokenDescriptor], bool]

CANDIDATE_PREDICATES: List[CandidatePredicate] = [
    lambda candidate, descriptor: candidate.power == descriptor.power,
    lambda candidate, descriptor: candidate.toughness == descriptor.toughness,
    lambda candidate, descriptor: set(candidate.colors) == set(descriptor.colors),
    lambda candidate, descriptor: set(candidate_type_words(candidate))
    == set(descriptor.type_words),
    lambda candidate, descriptor: set(candidate_abilities(candidate))
    == set(descriptor.abilities),
]


def resolve_token_candidate(
    descriptor: TokenDescriptor, candidates: Iterable[CatalogCardObject]
) -> Optional[CatalogCardObject]:
    """
    First candidate, in catalog order, that agrees with the descriptor on
    stats, colors, types and abilities
    :param descriptor: Token description
    :param candidates: Catalog records sharing the token's name
    :return: Matching record or None
    """
    return next(
        (
            candidate
            for candidate in candidates
            if all(predicate(candidate, descriptor) for predicate in CANDIDATE_PREDICATES)
        ),
        None,
    )


def get_linked_token_ids(scryfall_object: Dict[str, Any]) -> List[str]:
    """
    Tokens & emblems Scryfall lists as related parts of a printing
    :param scryfall_object: Scryfall printing
    :return: Token ids
    """
    return [
        part["id"]
        for part in scryfall_object.get("all_parts") or []
        if part.get("component") == "token"
        or (part.get("type_line") or "").startswith("Emblem")
    ]


class TokenInferenceEngine:
    """
    Resolves token links for catalog records against a catalog store
    """

    catalog: "CatalogStore"
    card_overrides: Dict[str, List[str]]
    universal_tokens: Dict[str, str]

    def __init__(
        self,
        catalog: "CatalogStore",
        card_overrides: Optional[Dict[str, List[str]]] = None,
        universal_tokens: Optional[Dict[str, str]] = None,
    ) -> None:
        self.catalog = catalog
        self.card_overrides = (
            card_overrides
            if card_overrides is not None
            else load_resource_json("token_overrides.json")
        )
        self.universal_tokens = (
            universal_tokens
            if universal_tokens is not None
            else load_resource_json("universal_tokens.json")
        )

    def get_override_token_ids(self, scryfall_object: Dict[str, Any]) -> List[str]:
        """
        Curated tokens for cards whose related parts are wrong or missing
        :param scryfall_object: Scryfall printing
        :return: Token ids
        """
        faces = scryfall_object.get("card_faces")
        name = faces[0].get("name") if faces else scryfall_object.get("name")
        return list(self.card_overrides.get(name or "", []))

    def infer_tokens(
        self, scryfall_object: Dict[str, Any], card: CatalogCardObject
    ) -> List[str]:
        """
        Work out every token a catalog record creates
        :param scryfall_object: Scryfall printing the record came from
        :param card: Catalog record
        :return: Token ids, in discovery order
        """
        linked_tokens = get_linked_token_ids(scryfall_object)

        override_tokens = self.get_override_token_ids(scryfall_object)
        if override_tokens:
            return override_tokens + linked_tokens

        tokens = list(linked_tokens)
        if not card.has_text():
            return tokens

        if not linked_tokens:
            tokens.extend(self.parse_rules_text(scryfall_object, card))
        tokens.extend(self.get_keyword_token_ids(card.oracle_text or ""))
        tokens.extend(self.get_emblem_token_ids(card))
        return tokens

    def parse_rules_text(
        self, scryfall_object: Dict[str, Any], card: CatalogCardObject
    ) -> List[str]:
        """
        Scan each line of rules text that mentions a token
        :param scryfall_object: Scryfall printing the record came from
        :param card: Catalog record
        :return: Token ids
        """
        tokens: List[str] = []
        for line in (card.oracle_text or "").split("\n"):
            if TOKEN_TRIGGER not in line:
                continue

            descriptor = extract_token_descriptor(line)
            if descriptor is None:
                continue

            if descriptor.name in self.universal_tokens:
                tokens.append(self.universal_tokens[descriptor.name])
                continue

            if descriptor.is_copy:
                tokens.extend(self._resolve_copy(line, scryfall_object))
                continue

            token = resolve_token_candidate(
                descriptor, self.catalog.get_cards_by_name(descriptor.name)
            )
            if token is not None:
                tokens.append(token.id)
            else:
                LOGGER.debug(f"No token found for {card.name}: {line}")

        return tokens

    @staticmethod
    def _resolve_copy(line: str, scryfall_object: Dict[str, Any]) -> List[str]:
        # Copying one of your own tokens gives nothing specific to link
        if GENERIC_COPY_WORDING in line.lower():
            return []
        return get_linked_token_ids(scryfall_object) or [
            constants.GENERIC_COPY_TOKEN_ID
        ]

    def get_keyword_token_ids(self, oracle_text: str) -> List[str]:
        return [
            self.universal_tokens[token_name]
            for fragment, token_name in KEYWORD_TRIGGERS.items()
            if fragment in oracle_text and token_name in self.universal_tokens
        ]

    def get_emblem_token_ids(self, card: CatalogCardObject) -> List[str]:
        if "emblem" not in (card.oracle_text or ""):
            return []
        hits = self.catalog.name_to_id.get(normalize_name(f"{card.name} emblem"))
        return [hits[0]] if hits else []
