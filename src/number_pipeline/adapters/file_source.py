"""
File Number Source.

Reads whitespace-separated integers from a text file. Scanning stops at the
first token that is not an integer and the numbers read up to that point
are returned. A missing or unreadable file is an error, never an empty
result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

from number_pipeline.domain.exceptions import NumberFileNotFoundError, NumberSourceError
from number_pipeline.domain.integers import parse_integer

logger = logging.getLogger(__name__)


class FileNumberSource:
    """Number source backed by a whitespace-separated text file."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Initialize file source.

        Args:
            encoding: Text encoding of number files
        """
        self.encoding = encoding

    def read_numbers(self, path: Union[str, Path]) -> Tuple[int, ...]:
        """
        Read integers from a file in file order.

        Args:
            path: Path to the number file

        Returns:
            Integers up to the first non-integer token

        Raises:
            NumberFileNotFoundError: If the file does not exist
            NumberSourceError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise NumberFileNotFoundError(path) from e
        except UnicodeDecodeError as e:
            raise NumberSourceError(path, f"not valid {self.encoding} text") from e
        except OSError as e:
            raise NumberSourceError(path, e.strerror or str(e)) from e

        numbers: List[int] = []
        for token in text.split():
            value = parse_integer(token)
            if value is None:
                logger.debug(
                    f"Stopped reading {path} at non-integer token {token!r} "
                    f"after {len(numbers)} numbers"
                )
                break
            numbers.append(value)

        logger.debug(f"Read {len(numbers)} numbers from {path}")
        return tuple(numbers)
