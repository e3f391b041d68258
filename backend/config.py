"""
Configuración de la API de jugadores.

Los valores por defecto están en Config; cada uno se puede sobreescribir con
una variable de entorno:

- TENNIS_STORE: memory | json | sqlite (default: json)
- TENNIS_PLAYERS_FILE: archivo JSON de jugadores (default: data/players.json)
- TENNIS_DATABASE_PATH: base SQLite para el store 'sqlite'
- TENNIS_HOST / TENNIS_PORT: dirección del servidor Flask
- TENNIS_LOG_LEVEL: DEBUG, INFO, WARNING...
- TENNIS_DEBUG: 1/true para el modo debug de Flask
"""

import os
import logging
from pathlib import Path

from models.database import DATABASE_PATH as DEFAULT_DATABASE_PATH
from stores import STORE_TYPES

BACKEND_DIR = Path(__file__).resolve().parent
DEFAULT_PLAYERS_FILE = BACKEND_DIR / 'data' / 'players.json'

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

TRUE_VALUES = ('1', 'true', 'yes', 'on')


class Config:
    """Valores por defecto"""
    STORE_TYPE = 'json'
    PLAYERS_FILE = str(DEFAULT_PLAYERS_FILE)
    DATABASE_PATH = DEFAULT_DATABASE_PATH
    HOST = '0.0.0.0'
    PORT = 5000
    LOG_LEVEL = 'INFO'
    DEBUG = False


# Clave de configuración -> variable de entorno
ENV_VARS = {
    'STORE_TYPE': 'TENNIS_STORE',
    'PLAYERS_FILE': 'TENNIS_PLAYERS_FILE',
    'DATABASE_PATH': 'TENNIS_DATABASE_PATH',
    'HOST': 'TENNIS_HOST',
    'PORT': 'TENNIS_PORT',
    'LOG_LEVEL': 'TENNIS_LOG_LEVEL',
    'DEBUG': 'TENNIS_DEBUG',
}


def load_config(environ=None):
    """
    Construir la configuración a partir de Config y del entorno.

    Args:
        environ: Mapeo de variables (default: os.environ)

    Returns:
        dict: configuración lista para app.config.update()

    Raises:
        ValueError: si el store, el puerto o el nivel de log no son válidos
    """
    if environ is None:
        environ = os.environ

    config = {key: getattr(Config, key) for key in ENV_VARS}
    for key, var in ENV_VARS.items():
        if environ.get(var) not in (None, ''):
            config[key] = environ[var]

    config['STORE_TYPE'] = str(config['STORE_TYPE']).lower()
    if config['STORE_TYPE'] not in STORE_TYPES:
        raise ValueError(f"{ENV_VARS['STORE_TYPE']} must be one of {STORE_TYPES}, got {config['STORE_TYPE']!r}")

    try:
        config['PORT'] = int(config['PORT'])
    except (TypeError, ValueError) as e:
        raise ValueError(f"{ENV_VARS['PORT']} must be an integer, got {config['PORT']!r}") from e
    if not 0 < config['PORT'] < 65536:
        raise ValueError(f"{ENV_VARS['PORT']} out of range: {config['PORT']}")

    config['LOG_LEVEL'] = str(config['LOG_LEVEL']).upper()
    if not isinstance(logging.getLevelName(config['LOG_LEVEL']), int):
        raise ValueError(f"{ENV_VARS['LOG_LEVEL']} is not a logging level: {config['LOG_LEVEL']!r}")

    if isinstance(config['DEBUG'], str):
        config['DEBUG'] = config['DEBUG'].strip().lower() in TRUE_VALUES

    return config


def setup_logging(level='INFO'):
    """Configurar logging básico (una sola vez por proceso)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
