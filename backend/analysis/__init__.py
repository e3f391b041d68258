from .exceptions import EmptyInputError, InvalidLimitError, PlayerNotFoundError, PlayerStatsError
from .player_stats import (
    best_win_ratio_country,
    body_mass_index,
    compute_statistics,
    compute_statistics_async,
    country_win_ratios,
    find_player_by_id,
    list_players,
    mean_body_mass_index,
    median_height,
    player_heights,
)

__all__ = [
    'PlayerStatsError',
    'PlayerNotFoundError',
    'EmptyInputError',
    'InvalidLimitError',
    'list_players',
    'find_player_by_id',
    'median_height',
    'player_heights',
    'body_mass_index',
    'mean_body_mass_index',
    'country_win_ratios',
    'best_win_ratio_country',
    'compute_statistics',
    'compute_statistics_async',
]
