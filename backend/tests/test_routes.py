"""
🧪 Tests para las rutas /api/players
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from app import create_app
from stores import InMemoryPlayerStore, JsonFilePlayerStore, PlayerStoreError


class TestListPlayersRoute:
    """Tests para GET/POST /api/players."""

    def test_get_all_players(self, client):
        response = client.get('/api/players')
        body = response.get_json()

        assert response.status_code == 200
        assert body['success'] is True
        assert body['count'] == 5
        assert [p['data']['rank'] for p in body['players']] == [1, 2, 10, 21, 52]

    def test_get_with_limit(self, client):
        response = client.get('/api/players?limit=2')
        body = response.get_json()

        assert response.status_code == 200
        assert body['count'] == 2
        assert body['players'][0]['data']['rank'] <= body['players'][1]['data']['rank']

    def test_post_with_limit(self, client):
        """Test: el límite también puede venir en el cuerpo JSON."""
        response = client.post('/api/players', json={'limit': 3})

        assert response.status_code == 200
        assert response.get_json()['count'] == 3

    def test_post_without_body(self, client):
        response = client.post('/api/players')

        assert response.status_code == 200
        assert response.get_json()['count'] == 5

    @pytest.mark.parametrize('query', ['limit=0', 'limit=-3', 'limit=abc'])
    def test_invalid_query_limit(self, client, query):
        response = client.get(f'/api/players?{query}')

        assert response.status_code == 400
        assert response.get_json()['success'] is False

    @pytest.mark.parametrize('payload', [{'limit': 1.5}, {'limit': '2'}, {'limit': 0}, [1, 2]])
    def test_invalid_body_limit(self, client, payload):
        response = client.post('/api/players', json=payload)

        assert response.status_code == 400

    def test_player_json_shape(self, client):
        """Test: el jugador se serializa con los nombres del catálogo."""
        player = client.get('/api/players?limit=1').get_json()['players'][0]

        assert player['id'] == 17
        assert player['country'] == {
            'code': 'ESP',
            'picture': 'https://tenisu.latelier.co/resources/Espagne.png',
        }
        assert player['data']['last'] == [1, 0, 0, 0, 1]


class TestPlayerByIdRoute:
    """Tests para GET /api/players/<id>."""

    def test_found(self, client):
        response = client.get('/api/players/52')
        body = response.get_json()

        assert response.status_code == 200
        assert body['player']['firstname'] == 'Novak'
        assert body['player']['data']['weight'] == 80000

    def test_not_found(self, client):
        response = client.get('/api/players/1')
        body = response.get_json()

        assert response.status_code == 404
        assert body['success'] is False
        assert 'id = 1' in body['error']


class TestStatisticsRoute:
    """Tests para GET /api/players/statistics."""

    def test_statistics(self, client):
        response = client.get('/api/players/statistics')
        statistics = response.get_json()['statistics']

        assert response.status_code == 200
        assert statistics['country'] == 'SRB'
        assert statistics['meanBodyMassIndex'] == pytest.approx(2.3357838995505835)
        assert statistics['medianPlayerHeight'] == 185

    def test_statistics_empty_catalog(self):
        """Test: sin jugadores se responde 422."""
        client = create_app({'TESTING': True}, store=InMemoryPlayerStore()).test_client()

        response = client.get('/api/players/statistics')

        assert response.status_code == 422
        assert response.get_json()['success'] is False

    def test_statistics_with_missing_height(self, tmp_path, player_dicts):
        """Test: un jugador sin altura del store JSON no rompe las estadísticas."""
        del player_dicts[1]['data']['height']
        json_file = tmp_path / "players.json"
        json_file.write_text(json.dumps({'players': player_dicts}), encoding='utf-8')
        client = create_app({'TESTING': True}, store=JsonFilePlayerStore(json_file)).test_client()

        response = client.get('/api/players/statistics')
        statistics = response.get_json()['statistics']

        assert response.status_code == 200
        # Alturas restantes: 175, 183, 185, 188
        assert statistics['medianPlayerHeight'] == 184
        assert statistics['country'] == 'SRB'

    def test_statistics_without_any_height(self, make_player):
        """Test: si ningún jugador tiene altura se responde 422."""
        store = InMemoryPlayerStore([make_player(1, height=None), make_player(2, height=None)])
        client = create_app({'TESTING': True}, store=store).test_client()

        response = client.get('/api/players/statistics')

        assert response.status_code == 422
        assert 'heights' in response.get_json()['error']


class TestStoreFailures:

    @pytest.fixture
    def broken_client(self):
        store = MagicMock()
        store.all_records.side_effect = PlayerStoreError("archivo no encontrado")
        return create_app({'TESTING': True}, store=store).test_client()

    @pytest.mark.parametrize('url', ['/api/players', '/api/players/52', '/api/players/statistics'])
    def test_store_error_returns_503(self, broken_client, url):
        response = broken_client.get(url)

        assert response.status_code == 503
        assert 'archivo no encontrado' in response.get_json()['error']

    def test_invalid_rank_in_json_store_returns_503(self, tmp_path, player_dicts):
        """Test: un rank nulo se rechaza al cargar, no al ordenar."""
        player_dicts[0]['data']['rank'] = None
        json_file = tmp_path / "players.json"
        json_file.write_text(json.dumps({'players': player_dicts}), encoding='utf-8')
        client = create_app({'TESTING': True}, store=JsonFilePlayerStore(json_file)).test_client()

        response = client.get('/api/players')

        assert response.status_code == 503
        assert 'rank' in response.get_json()['error']

    def test_unexpected_error_returns_500(self):
        store = MagicMock()
        store.all_records.side_effect = RuntimeError("boom")
        client = create_app({'TESTING': True}, store=store).test_client()

        response = client.get('/api/players')

        assert response.status_code == 500
        assert response.get_json()['error'] == 'boom'


class TestAppRoutes:
    """Tests para /, /health y el log de peticiones."""

    def test_index(self, client):
        body = client.get('/').get_json()

        assert body['status'] == 'online'
        assert 'GET /api/players/statistics' in body['available_endpoints']

    def test_health(self, client):
        body = client.get('/health').get_json()

        assert body['status'] == 'healthy'
        assert body['components']['store'] == 'InMemoryPlayerStore'

    def test_cors_enabled(self, client):
        response = client.get('/api/players', headers={'Origin': 'http://localhost:3000'})

        assert response.headers.get('Access-Control-Allow-Origin') == '*'

    def test_request_logging(self, client, caplog):
        """Test: cada petición registra entrada y salida con la IP del proxy."""
        with caplog.at_level(logging.INFO, logger='utils.request_logging'):
            client.get('/api/players/52', headers={'X-Forwarded-For': '10.0.0.1, ::ffff:192.168.1.7'})

        assert "Incoming Request on /api/players/52" in caplog.text
        assert "End Request for /api/players/52" in caplog.text
        assert "ip=192.168.1.7" in caplog.text
        assert "status=200" in caplog.text
