"""
Stores de jugadores: origen de las instantáneas que consume el motor de estadísticas.
"""

import logging

from .base import PlayerStore, PlayerStoreError
from .json_store import JsonFilePlayerStore
from .memory_store import InMemoryPlayerStore
from .sqlite_store import SqlitePlayerStore

logger = logging.getLogger(__name__)

STORE_TYPES = ('memory', 'json', 'sqlite')


def build_store(config):
    """
    Crear el store indicado en la configuración (STORE_TYPE).

    'memory' parte de los jugadores del archivo JSON y los mantiene en memoria;
    'sqlite' crea la tabla si hace falta.
    """
    store_type = config['STORE_TYPE']
    if store_type == 'json':
        store = JsonFilePlayerStore(config['PLAYERS_FILE'])
    elif store_type == 'memory':
        store = InMemoryPlayerStore(JsonFilePlayerStore(config['PLAYERS_FILE']).all_records())
    elif store_type == 'sqlite':
        store = SqlitePlayerStore(config['DATABASE_PATH'])
        store.init_db()
    else:
        raise ValueError(f"❌ Store desconocido: {store_type!r} (opciones: {', '.join(STORE_TYPES)})")

    logger.info(f"✅ Store de jugadores: {type(store).__name__}")
    return store


__all__ = [
    'PlayerStore',
    'PlayerStoreError',
    'InMemoryPlayerStore',
    'JsonFilePlayerStore',
    'SqlitePlayerStore',
    'STORE_TYPES',
    'build_store',
]
