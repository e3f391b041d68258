# services/__init__.py
# Este archivo hace que Python reconozca 'services' como un paquete

"""
Paquete de servicios para la API de jugadores

Contiene:
- player_service.py: Casos de uso (lista, búsqueda por id, estadísticas)
"""

from .player_service import PlayerService

__all__ = ['PlayerService']
