"""Dynamic version read from cardcatalog.properties."""

import configparser
import pathlib

_config = configparser.ConfigParser()
_config.read(pathlib.Path(__file__).parent / "resources" / "cardcatalog.properties")
__version__ = _config.get("CardCatalog", "version", fallback="1.0.0+fallback")
