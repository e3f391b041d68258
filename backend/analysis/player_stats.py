"""
📊 Player Stats - Motor de estadísticas del catálogo de jugadores
Paginación, búsqueda por id y estadísticas agregadas (altura mediana,
IMC medio y país con mejor ratio de victorias).

Todas las funciones reciben una instantánea de solo lectura de los
jugadores y nunca modifican la colección recibida.
"""

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

from analysis.exceptions import EmptyInputError, InvalidLimitError, PlayerNotFoundError
from models.player import LOSS, WIN, CountryAggregate, PlayerRecord, StatisticsResult, is_number

logger = logging.getLogger(__name__)


def list_players(players: Sequence[PlayerRecord], limit: Optional[int] = None) -> List[PlayerRecord]:
    """
    Jugadores ordenados por ranking ascendente, opcionalmente limitados.

    Args:
        players: Instantánea de jugadores
        limit: Máximo de jugadores a devolver. None = sin límite.

    Returns:
        list: Copia ordenada (orden estable entre rankings iguales)

    Raises:
        InvalidLimitError: si limit no es un entero positivo
    """
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
        raise InvalidLimitError(limit)

    ordered = sorted(players, key=lambda player: player.data.rank)
    if limit is None or limit >= len(ordered):
        return ordered
    return ordered[:limit]


def find_player_by_id(players: Iterable[PlayerRecord], player_id: int) -> PlayerRecord:
    """Buscar un jugador por id. Lanza PlayerNotFoundError si no existe."""
    for player in players:
        if player.id == player_id:
            return player
    raise PlayerNotFoundError(player_id)


def median_height(heights: Sequence[float]) -> float:
    """
    Altura mediana.

    Con un número par de valores devuelve la media de los dos centrales.

    Raises:
        EmptyInputError: si no hay alturas
    """
    if not heights:
        raise EmptyInputError('heights')

    nums = sorted(heights)
    mid = len(nums) // 2
    if len(nums) % 2 != 0:
        return nums[mid]
    return (nums[mid - 1] + nums[mid]) / 2


def player_heights(players: Iterable[PlayerRecord]) -> List[float]:
    """Alturas válidas (numéricas y mayores que 0); las ausentes no cuentan."""
    return [
        player.data.height for player in players
        if is_number(player.data.height) and player.data.height > 0
    ]


def body_mass_index(player: PlayerRecord) -> float:
    """IMC de un jugador (peso / altura²), 0 si falta el peso o la altura."""
    weight = player.data.weight
    height = player.data.height
    if weight is not None and height is not None and weight > 0 and height > 0:
        return weight / height ** 2
    return 0.0


def mean_body_mass_index(players: Sequence[PlayerRecord]) -> float:
    """
    IMC medio de todos los jugadores.

    Los jugadores sin datos físicos válidos aportan 0 pero siguen contando
    en el denominador.

    Raises:
        EmptyInputError: si no hay jugadores
    """
    if not players:
        raise EmptyInputError('players')

    # Primero todas las contribuciones, después la reducción
    contributions = [body_mass_index(player) for player in players]
    return sum(contributions) / len(players)


def country_win_ratios(players: Sequence[PlayerRecord]) -> List[CountryAggregate]:
    """
    Agregados de victorias/derrotas por país, del mejor al peor ratio.

    Los países aparecen en orden de primera aparición antes de ordenar, así
    que los empates se resuelven a favor del país que aparece primero.
    Un país sin partidos decididos tiene ratio -inf.

    Raises:
        EmptyInputError: si no hay jugadores
    """
    if not players:
        raise EmptyInputError('players')

    aggregates = {}
    for player in players:
        code = player.country.code
        aggregate = aggregates.get(code)
        if aggregate is None:
            aggregate = aggregates[code] = CountryAggregate(country=code)

        for match in player.data.last:
            # True == 1 en Python; un booleano no es un resultado válido
            if isinstance(match, bool):
                continue
            if match == WIN:
                aggregate.total_win += 1
            elif match == LOSS:
                aggregate.total_lost += 1

    return sorted(aggregates.values(), key=lambda agg: agg.win_ratio, reverse=True)


def best_win_ratio_country(players: Sequence[PlayerRecord]) -> str:
    """Código del país con mejor ratio de victorias."""
    ranking = country_win_ratios(players)
    best = ranking[0]
    logger.debug(
        f"🏆 Mejor país: {best.country} "
        f"(ganados={best.total_win}, perdidos={best.total_lost}, ratio={best.win_ratio})"
    )
    return best.country


async def compute_statistics_async(players: Sequence[PlayerRecord]) -> StatisticsResult:
    """
    Calcular las tres estadísticas en paralelo y unir los resultados.

    La mediana solo usa alturas válidas (ver player_heights); si ningún
    jugador tiene altura se lanza EmptyInputError.
    Si alguna falla se propaga el primer error y se descartan las demás.
    """
    snapshot = tuple(players)
    heights = player_heights(snapshot)

    median, mean_bmi, country = await asyncio.gather(
        asyncio.to_thread(median_height, heights),
        asyncio.to_thread(mean_body_mass_index, snapshot),
        asyncio.to_thread(best_win_ratio_country, snapshot),
    )

    return StatisticsResult(
        country=country,
        mean_body_mass_index=mean_bmi,
        median_player_height=median,
    )


def compute_statistics(players: Sequence[PlayerRecord]) -> StatisticsResult:
    """
    Versión síncrona de compute_statistics_async.

    Usa asyncio.run, así que no se puede llamar con un event loop ya en
    marcha (vistas async de Flask, corrutinas): ahí hay que usar
    `await compute_statistics_async(players)`.

    Raises:
        RuntimeError: si se llama desde un event loop en ejecución
    """
    return asyncio.run(compute_statistics_async(players))
