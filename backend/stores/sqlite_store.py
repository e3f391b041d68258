"""Store respaldado por la tabla 'players' de SQLite."""

import logging
import sqlite3
from typing import Iterable, List

from models import database
from models.player import PlayerRecord
from stores.base import PlayerStoreError

logger = logging.getLogger(__name__)


class SqlitePlayerStore:

    def __init__(self, db_path=database.DATABASE_PATH):
        self.db_path = str(db_path)

    def init_db(self):
        database.init_db(self.db_path)

    def all_records(self) -> List[PlayerRecord]:
        try:
            return database.get_all_players(self.db_path)
        except sqlite3.Error as e:
            raise PlayerStoreError(f"❌ Error leyendo jugadores de {self.db_path}: {e}") from e
        except (TypeError, ValueError) as e:
            raise PlayerStoreError(f"❌ Jugador inválido en {self.db_path}: {e!r}") from e

    def count(self) -> int:
        try:
            return database.count_players(self.db_path)
        except sqlite3.Error as e:
            raise PlayerStoreError(f"❌ Error contando jugadores en {self.db_path}: {e}") from e

    def seed_from_records(self, players: Iterable[PlayerRecord]) -> int:
        """
        Insertar (o reemplazar) jugadores en una sola transacción.

        Returns:
            int: número de jugadores guardados
        """
        conn = database.get_db(self.db_path)
        saved = 0
        try:
            with conn:
                for player in players:
                    database.insert_player(conn, player)
                    saved += 1
        except sqlite3.Error as e:
            raise PlayerStoreError(f"❌ Error guardando jugadores en {self.db_path}: {e}") from e
        finally:
            conn.close()

        logger.info(f"💾 {saved} jugadores guardados en {self.db_path}")
        return saved
