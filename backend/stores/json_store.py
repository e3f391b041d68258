"""
🗂️ JSON Store - Jugadores leídos desde un archivo JSON
Acepta una lista de jugadores o el formato {"players": [...]}
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from models.player import PlayerRecord, players_from_dicts
from stores.base import PlayerStoreError

logger = logging.getLogger(__name__)


class JsonFilePlayerStore:
    """Relee el archivo en cada consulta para reflejar los cambios en disco."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def all_records(self) -> List[PlayerRecord]:
        """
        📥 Cargar todos los jugadores del archivo.

        Raises:
            PlayerStoreError: si el archivo no existe, no es JSON válido
                o algún jugador está incompleto
        """
        if not self.path.exists():
            raise PlayerStoreError(f"❌ Archivo de jugadores no encontrado: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PlayerStoreError(f"❌ JSON inválido en {self.path}: {e}") from e

        items = data.get('players') if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise PlayerStoreError(f"❌ {self.path.name} no contiene una lista de jugadores")

        try:
            players = players_from_dicts(items)
        except (KeyError, TypeError, ValueError) as e:
            raise PlayerStoreError(f"❌ Jugador inválido en {self.path.name}: {e!r}") from e

        logger.debug(f"📥 {len(players)} jugadores cargados desde {self.path}")
        return players
