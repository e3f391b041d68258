"""
Errores tipados del motor de estadísticas de jugadores.
La capa HTTP decide el código de estado de cada uno.
"""


class PlayerStatsError(Exception):
    """Error base del motor de estadísticas."""


class PlayerNotFoundError(PlayerStatsError, LookupError):
    """No existe ningún jugador con el id solicitado."""

    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"player with id = {player_id} is not found")


class EmptyInputError(PlayerStatsError, ValueError):
    """Se pidió una estadística sobre una colección vacía."""

    def __init__(self, what="players"):
        self.what = what
        super().__init__(f"{what} empty")


class InvalidLimitError(PlayerStatsError, ValueError):
    """El límite de paginación no es un entero positivo."""

    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"limit must be a positive integer, got {limit!r}")
