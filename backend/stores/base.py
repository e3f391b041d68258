"""
Contrato de los stores de jugadores.
Un store solo entrega instantáneas; no sabe nada de estadísticas.
"""

from typing import List, Protocol

from models.player import PlayerRecord


class PlayerStoreError(Exception):
    """El store no pudo entregar los jugadores (archivo ausente, JSON inválido, BD...)."""


class PlayerStore(Protocol):
    """Cualquier origen de jugadores: lista estática, archivo JSON o base de datos."""

    def all_records(self) -> List[PlayerRecord]:
        """Devolver una lista nueva con todos los jugadores."""
        ...
