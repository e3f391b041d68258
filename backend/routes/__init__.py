# routes/__init__.py
# Este archivo hace que Python reconozca 'routes' como un paquete

"""
Paquete de rutas para la API de jugadores

Contiene:
- players.py: Rutas del catálogo de jugadores y estadísticas
"""
