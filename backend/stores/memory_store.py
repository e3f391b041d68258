"""Store en memoria a partir de una lista estática de jugadores."""

from typing import Iterable, List

from models.player import PlayerRecord


class InMemoryPlayerStore:
    """Guarda una copia inmutable; cada llamada entrega una lista nueva."""

    def __init__(self, players: Iterable[PlayerRecord] = ()):
        self._players = tuple(players)

    def all_records(self) -> List[PlayerRecord]:
        return list(self._players)

    def __len__(self):
        return len(self._players)
