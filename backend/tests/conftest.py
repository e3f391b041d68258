"""
🧪 Fixtures compartidas: los cinco jugadores del catálogo de ejemplo
"""

import os
import sys
import json
import copy

import pytest

# Añadir el directorio backend al sys.path para importar los módulos del proyecto
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.player import PlayerRecord, players_from_dicts
from stores import InMemoryPlayerStore

PLAYER_DICTS = [
    {
        'id': 52,
        'firstname': 'Novak',
        'lastname': 'Djokovic',
        'shortname': 'N.DJO',
        'sex': 'M',
        'country': {'picture': 'https://tenisu.latelier.co/resources/Serbie.png', 'code': 'SRB'},
        'picture': 'https://tenisu.latelier.co/resources/Djokovic.png',
        'data': {'rank': 2, 'points': 2542, 'weight': 80000, 'height': 188, 'age': 31, 'last': [1, 1, 1, 1, 1]},
    },
    {
        'id': 95,
        'firstname': 'Venus',
        'lastname': 'Williams',
        'shortname': 'V.WIL',
        'sex': 'F',
        'country': {'picture': 'https://tenisu.latelier.co/resources/USA.png', 'code': 'USA'},
        'picture': 'https://tenisu.latelier.co/resources/Venus.webp',
        'data': {'rank': 52, 'points': 1105, 'weight': 74000, 'height': 185, 'age': 38, 'last': [0, 1, 0, 0, 1]},
    },
    {
        'id': 65,
        'firstname': 'Stan',
        'lastname': 'Wawrinka',
        'shortname': 'S.WAW',
        'sex': 'M',
        'country': {'picture': 'https://tenisu.latelier.co/resources/Suisse.png', 'code': 'SUI'},
        'picture': 'https://tenisu.latelier.co/resources/Wawrinka.png',
        'data': {'rank': 21, 'points': 1784, 'weight': 81000, 'height': 183, 'age': 33, 'last': [1, 1, 1, 0, 1]},
    },
    {
        'id': 102,
        'firstname': 'Serena',
        'lastname': 'Williams',
        'shortname': 'S.WIL',
        'sex': 'F',
        'country': {'picture': 'https://tenisu.latelier.co/resources/USA.png', 'code': 'USA'},
        'picture': 'https://tenisu.latelier.co/resources/Serena.png',
        'data': {'rank': 10, 'points': 3521, 'weight': 72000, 'height': 175, 'age': 37, 'last': [0, 1, 1, 1, 0]},
    },
    {
        'id': 17,
        'firstname': 'Rafael',
        'lastname': 'Nadal',
        'shortname': 'R.NAD',
        'sex': 'M',
        'country': {'picture': 'https://tenisu.latelier.co/resources/Espagne.png', 'code': 'ESP'},
        'picture': 'https://tenisu.latelier.co/resources/Nadal.png',
        'data': {'rank': 1, 'points': 1982, 'weight': 85000, 'height': 185, 'age': 33, 'last': [1, 0, 0, 0, 1]},
    },
]


def build_player(player_id, rank=1, country='SRB', weight=80000, height=188, last=(1, 1, 1, 1, 1)):
    """Crear un jugador mínimo para tests."""
    return PlayerRecord.from_dict({
        'id': player_id,
        'firstname': f'Player{player_id}',
        'lastname': 'Test',
        'shortname': f'P.{player_id}',
        'sex': 'M',
        'country': {'code': country, 'picture': None},
        'picture': None,
        'data': {'rank': rank, 'points': 0, 'weight': weight, 'height': height, 'age': 30, 'last': list(last)},
    })


@pytest.fixture
def player_dicts():
    """Copia de los diccionarios JSON de los cinco jugadores."""
    return copy.deepcopy(PLAYER_DICTS)


@pytest.fixture
def players(player_dicts):
    """Los cinco jugadores como PlayerRecord."""
    return players_from_dicts(player_dicts)


@pytest.fixture
def players_json_file(tmp_path, player_dicts):
    """Archivo JSON temporal con el formato {"players": [...]}."""
    json_file = tmp_path / "players.json"
    json_file.write_text(json.dumps({'players': player_dicts}), encoding='utf-8')
    return json_file


@pytest.fixture
def memory_store(players):
    return InMemoryPlayerStore(players)


@pytest.fixture
def app(memory_store):
    """Aplicación Flask con el store en memoria."""
    from app import create_app
    flask_app = create_app({'TESTING': True, 'STORE_TYPE': 'memory'}, store=memory_store)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_player():
    """Fábrica de jugadores mínimos: make_player(id, rank=..., country=..., last=...)."""
    return build_player
