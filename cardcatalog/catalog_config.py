"""
CardCatalog Configuration Service
"""

import configparser
import logging
import pathlib
from typing import Optional

from singleton_decorator import singleton

from . import constants


@singleton
class CatalogConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    catalog_version: str
    output_path: pathlib.Path

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()

        config_path = config_path or constants.CONFIG_PATH
        self.logger.info(f"Loading configuration from {config_path}")
        self.__load_config_from_local_file(config_path)

        self.catalog_version = self.get(
            "CardCatalog", "version", fallback="NO_VERSION_FOUND"
        )
        if not self.has_section("CardCatalog"):
            self.logger.warning(
                "Key 'version' is missing from Section 'CardCatalog' in config file"
            )
            self.catalog_version = (
                f"1.X.X+{constants.CATALOG_BUILD_DATE.replace('-', '')}"
            )

        output_path = self.get("Output", "output_path")
        self.output_path = (
            pathlib.Path(output_path).expanduser().resolve()
            if output_path
            else constants.OUTPUT_PATH
        )

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as CardCatalog configuration file
        :param file_path: Path to Configuration file
        """
        self.config_parser.read(str(file_path))

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if self.has_option(section, option):
            return self.config_parser.getint(section, option, fallback=fallback)
        return fallback

    def get_path(self, section: str, option: str) -> Optional[pathlib.Path]:
        """
        Get a filesystem path from configuration, if one was set
        :param section: Section header
        :param option: Key in section
        :returns Expanded path or None
        """
        value = self.get(section, option)
        if not value:
            return None
        return pathlib.Path(value).expanduser()

    def has_section(self, section: str) -> bool:
        """
        Check if Configuration has a specific section
        :param section: Section header to find
        :return Does Section header exist
        """
        return self.config_parser.has_section(section)

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
