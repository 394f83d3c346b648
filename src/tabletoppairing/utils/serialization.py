"""JSON save/load for tournament snapshots.

The engine itself never touches storage; these helpers exist for hosts
that want a file-based store and for the testing CLI.
"""

# Tabletop Pairing
# Copyright (C) 2025  Tabletop Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from pathlib import Path
from typing import Union

from tabletoppairing.constants import SAVE_FILE_EXTENSION
from tabletoppairing.exceptions import FileLoadException, FileSaveException
from tabletoppairing.models.tournament import Tournament
from tabletoppairing.utils import setup_logger

logger = setup_logger(__name__)


def tournament_to_json(tournament: Tournament, indent: int = 2) -> str:
    """Serialize a tournament snapshot to a JSON string."""
    return json.dumps(tournament.to_dict(), indent=indent)


def tournament_from_json(content: str) -> Tournament:
    """Rebuild a tournament snapshot from a JSON string.

    Raises:
        FileLoadException: If the content is not a valid tournament document
    """
    try:
        data = json.loads(content)
        return Tournament.from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Invalid tournament data: {e}") from e


def save_tournament(tournament: Tournament, path: Union[str, Path]) -> Path:
    """Write a tournament snapshot to ``path``.

    A ``.json`` suffix is added when the path has none.

    Returns:
        The path actually written

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(SAVE_FILE_EXTENSION)
    try:
        path.write_text(tournament_to_json(tournament), encoding="utf-8")
    except OSError as e:
        raise FileSaveException(f"Could not save tournament to {path}: {e}") from e
    logger.info("Saved tournament %s to %s", tournament.name, path)
    return path


def load_tournament(path: Union[str, Path]) -> Tournament:
    """Read a tournament snapshot from ``path``.

    Raises:
        FileLoadException: If the file is missing or malformed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e
    tournament = tournament_from_json(content)
    logger.info("Loaded tournament %s from %s", tournament.name, path)
    return tournament
