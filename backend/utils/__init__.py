# utils/__init__.py
# Utilidades comunes de la aplicación Flask
