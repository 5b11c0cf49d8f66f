"""
CardCatalog Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib
from typing import Dict, List, Set

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = pathlib.Path(__file__).resolve().parent.joinpath(
    "resources"
)
CONFIG_PATH: pathlib.Path = pathlib.Path(
    os.environ.get(
        "CARDCATALOG_CONFIG", RESOURCE_PATH.joinpath("cardcatalog.properties")
    )
)
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("CARDCATALOG_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)
OUTPUT_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("private")

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("cardcatalog_logs")

CATALOG_BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

# Back faces get the front face's id with this appended
SECONDARY_ID_SUFFIX: str = "2"
FACE_SEPARATOR: str = " // "

# Layouts whose colors & costs only live at the printing level
PRINTING_LEVEL_LAYOUTS: Set[str] = {"flip", "split", "adventure"}
SPLICED_COST_LAYOUTS: Set[str] = {"split", "adventure"}

LEGALITY_FORMATS: List[str] = [
    "Legacy",
    "Modern",
    "Standard",
    "Pioneer",
    "Pauper",
    "Brawl",
    "Historic",
    "Commander",
    "Penny",
    "Vintage",
]
NOT_LEGAL: str = "not_legal"

MASTERPIECE_SET_CODES: Set[str] = {
    "mps",  # Kaladesh Inventions
    "mp2",  # Amonkhet Invocations
    "exp",  # Zendikar Expeditions
    "amh1",  # Modern Horizons Art Series
}
PROMO_FRAME_EFFECTS: Set[str] = {"extendedart", "showcase"}

PRICE_KEYS: List[str] = ["usd", "usd_foil", "usd_etched", "eur", "tix"]

DEFAULT_ELO: int = 1200
EMBEDDING_LENGTH: int = 64

COLOR_WORD_MAP: Dict[str, str] = {
    "white": "W",
    "blue": "U",
    "black": "B",
    "red": "R",
    "green": "G",
}

# Token the text parser falls back on for "a copy of" effects
GENERIC_COPY_TOKEN_ID: str = "a020dc47-3747-4123-9954-f0e87a858b8c"

# Sets excluded from presentable images
UNPRESENTABLE_SET_CODES: Set[str] = {"myb", "mb1"}

# Names of the serialized catalog views, in write order
CATALOG_ARTIFACTS: List[str] = [
    "names",
    "cardtree",
    "carddict",
    "nameToId",
    "oracleToId",
    "english",
    "full_names",
    "imagedict",
    "cardimages",
]
