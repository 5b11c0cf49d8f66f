"""
CardCatalog output generator to write out catalog artifacts to file
"""

import logging
import pathlib
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, List

import orjson

from .catalog_store import CatalogStore
from .classes import JsonObject
from .errors import CatalogWriteError

LOGGER = logging.getLogger(__name__)


def _default(obj: Any) -> Any:
    if isinstance(obj, JsonObject):
        return obj.to_json()
    raise TypeError(f"Type {type(obj).__name__} is not JSON serializable")


def write_to_file(
    output_path: pathlib.Path, file_name: str, file_contents: Any, pretty_print: bool
) -> pathlib.Path:
    """
    Dump content to a file in the outputs directory
    :param output_path: Directory to write into
    :param file_name: File to dump to, without extension
    :param file_contents: Contents to dump
    :param pretty_print: Pretty or minimal
    :return: Path written
    """
    write_file = output_path.joinpath(f"{file_name}.json")
    write_file.parent.mkdir(parents=True, exist_ok=True)

    serialized = orjson.dumps(
        file_contents,
        default=_default,
        option=orjson.OPT_INDENT_2 if pretty_print else 0,
    )
    # Write to a side file first so a failed dump never leaves a half file behind
    temp_file = write_file.with_suffix(".json.tmp")
    temp_file.write_bytes(serialized)
    temp_file.replace(write_file)

    return write_file


def write_catalog(
    catalog: CatalogStore,
    output_path: pathlib.Path,
    pretty_print: bool = False,
    max_workers: int = 4,
) -> Dict[str, pathlib.Path]:
    """
    Write every catalog artifact. Only call once the catalog is complete.
    :param catalog: Finished catalog
    :param output_path: Directory to write into
    :param pretty_print: Pretty or minimal
    :param max_workers: Files written at once
    :return: Artifact name -> file written
    """
    LOGGER.info(f"Saving catalog files to {output_path}")
    artifacts = catalog.artifacts()

    written: Dict[str, pathlib.Path] = {}
    failed: List[str] = []
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        futures = {
            executor.submit(
                write_to_file, output_path, name, contents, pretty_print
            ): name
            for name, contents in artifacts.items()
        }

        for future in as_completed(futures):
            name = futures[future]
            try:
                written[name] = future.result()
            except (OSError, TypeError, orjson.JSONEncodeError) as error:
                LOGGER.error(f"An error occurred while writing {name}: {error}")
                failed.append(name)

    if failed:
        raise CatalogWriteError(sorted(failed), "Unable to write catalog files")

    LOGGER.info("All JSON files saved.")
    return written
