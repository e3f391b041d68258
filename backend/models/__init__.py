# models/__init__.py
# Modelos de jugadores y acceso a SQLite
