"""
Installation setup for cardcatalog
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("cardcatalog/resources/cardcatalog.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """
    Read a requirements file, ignoring comments & blank lines
    :param file_name: Requirements file in the project root
    :return: Requirement strings
    """
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []
    return [
        line.strip()
        for line in requirements_file.open(encoding="utf-8").readlines()
        if line.strip() and not line.startswith("#")
    ]


setuptools.setup(
    name="cardcatalog",
    version=config.get("CardCatalog", "version", fallback="1.0.0+fallback"),
    description="Trading card catalog builder for Scryfall bulk data",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Database",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "Database",
        "JSON",
        "MTG",
        "Scryfall",
        "Trading Cards",
        "Magic: The Gathering",
    ],
    python_requires=">=3.10",
    include_package_data=True,
    package_data={"cardcatalog": ["resources/*.json", "resources/*.properties"]},
    packages=setuptools.find_packages(include=["cardcatalog", "cardcatalog.*"]),
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
    entry_points={"console_scripts": ["cardcatalog=cardcatalog.__main__:main"]},
)
