# services/player_service.py - Casos de uso del catálogo de jugadores
# Lista paginada, búsqueda por id y estadísticas sobre el store configurado

import logging

from analysis.player_stats import compute_statistics, find_player_by_id, list_players
from stores.base import PlayerStore

logger = logging.getLogger(__name__)


class PlayerService:
    """
    Servicio de jugadores.
    Pide una instantánea al store una vez por llamada y delega el cálculo
    al motor de estadísticas. Los errores se registran y se propagan.
    """

    def __init__(self, store: PlayerStore):
        self.store = store

    def list_players(self, limit=None):
        logger.info(f"🔍 Buscando jugadores (limit={limit})")
        try:
            players = list_players(self.store.all_records(), limit)
        except Exception as e:
            logger.error(f"❌ Error buscando jugadores: {e}")
            raise
        logger.info(f"✅ {len(players)} jugadores encontrados")
        return players

    def get_player(self, player_id):
        logger.info(f"🔍 Buscando jugador id={player_id}")
        try:
            player = find_player_by_id(self.store.all_records(), player_id)
        except Exception as e:
            logger.error(f"❌ Error buscando jugador id={player_id}: {e}")
            raise
        logger.info(f"✅ Jugador encontrado: {player.full_name}")
        return player

    def get_statistics(self):
        logger.info("📊 Calculando estadísticas de jugadores")
        try:
            statistics = compute_statistics(self.store.all_records())
        except Exception as e:
            logger.error(f"❌ Error calculando estadísticas: {e}")
            raise
        logger.info(f"✅ Estadísticas calculadas: {statistics.to_dict()}")
        return statistics
