"""
Scryfall bulk data file reader
Streams printings out of a bulk JSON array or NDJSON file
without loading the whole file into memory.
"""

import gzip
import logging
import pathlib
from typing import IO, Any, Dict, Iterator

import ijson
import orjson

from ..errors import SourceUnavailableError

GZIP_MAGIC = b"\x1f\x8b"


class ScryfallBulkFileProvider:
    """Reader for Scryfall bulk data files already on disk."""

    LOGGER = logging.getLogger(__name__)

    def __init__(self, path: pathlib.Path) -> None:
        self.path = pathlib.Path(path).expanduser()

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return self.iter_cards()

    def _open(self) -> IO[bytes]:
        if not self.path.is_file():
            raise SourceUnavailableError(str(self.path), "Bulk file does not exist")

        with self.path.open("rb") as probe:
            is_gzipped = probe.read(2) == GZIP_MAGIC

        if is_gzipped:
            return gzip.open(self.path, "rb")
        return self.path.open("rb")

    def _is_ndjson(self) -> bool:
        suffixes = [suffix for suffix in self.path.suffixes if suffix != ".gz"]
        return bool(suffixes) and suffixes[-1] in {".ndjson", ".jsonl"}

    def iter_cards(self) -> Iterator[Dict[str, Any]]:
        """
        Yield each printing in file order. Every call starts over
        from the top of the file.
        :return: Iterator of Scryfall printings
        """
        self.LOGGER.info(f"Reading {self.path}")

        count = 0
        try:
            with self._open() as file:
                if self._is_ndjson():
                    for line in file:
                        if line.strip():
                            count += 1
                            yield orjson.loads(line)
                else:
                    # Floats instead of Decimals, so values compare & serialize cleanly
                    for item in ijson.items(file, "item", use_float=True):
                        count += 1
                        yield item
        except (OSError, ijson.JSONError, orjson.JSONDecodeError) as error:
            raise SourceUnavailableError(
                str(self.path), f"Unable to read bulk file: {error}"
            ) from error

        self.LOGGER.info(f"Read {count:,} items from {self.path}")
