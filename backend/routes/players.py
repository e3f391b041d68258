# routes/players.py - Rutas de API para el catálogo de jugadores
# Solo lectura: lista por ranking, detalle por id y estadísticas globales

import logging

from flask import Blueprint, current_app, jsonify, request

from analysis.exceptions import EmptyInputError, InvalidLimitError, PlayerNotFoundError
from stores import PlayerStoreError

logger = logging.getLogger(__name__)

# 🏗️ CREAR BLUEPRINT
players_bp = Blueprint('players', __name__)


def get_player_service():
    return current_app.extensions['player_service']


def error_response(error, message, status):
    return jsonify({
        "success": False,
        "error": str(error),
        "message": message
    }), status


def parse_limit(raw_limit):
    """
    Límite de paginación desde la query string (texto).
    None o ausente = sin límite.
    """
    if raw_limit is None:
        return None
    try:
        return int(raw_limit)
    except ValueError:
        raise InvalidLimitError(raw_limit) from None


# 📊 RUTA: LISTAR JUGADORES ORDENADOS POR RANKING
@players_bp.route('/players', methods=['GET', 'POST'])
def get_players():
    """
    GET  /api/players?limit=5
    POST /api/players  Body: {"limit": 5}
    Jugadores ordenados por ranking ascendente
    """
    try:
        if request.method == 'POST':
            data = request.get_json(silent=True) or {}
            if not isinstance(data, dict):
                raise InvalidLimitError(data)
            limit = data.get('limit')
        else:
            limit = parse_limit(request.args.get('limit'))

        players = get_player_service().list_players(limit)

        return jsonify({
            "success": True,
            "count": len(players),
            "players": [player.to_dict() for player in players],
            "message": f"✅ {len(players)} jugadores encontrados"
        }), 200

    except InvalidLimitError as e:
        return error_response(e, "❌ El límite debe ser un entero positivo", 400)
    except PlayerStoreError as e:
        return error_response(e, "❌ Catálogo de jugadores no disponible", 503)
    except Exception as e:
        logger.exception("❌ Error inesperado listando jugadores")
        return error_response(e, "❌ Error obteniendo jugadores", 500)


# 📈 RUTA: ESTADÍSTICAS GLOBALES
@players_bp.route('/players/statistics', methods=['GET'])
def get_statistics():
    """
    GET /api/players/statistics
    País con mejor ratio de victorias, IMC medio y altura mediana
    """
    try:
        statistics = get_player_service().get_statistics()

        return jsonify({
            "success": True,
            "statistics": statistics.to_dict(),
            "message": "✅ Estadísticas calculadas correctamente"
        }), 200

    except EmptyInputError as e:
        return error_response(e, "❌ No hay jugadores para calcular estadísticas", 422)
    except PlayerStoreError as e:
        return error_response(e, "❌ Catálogo de jugadores no disponible", 503)
    except Exception as e:
        logger.exception("❌ Error inesperado calculando estadísticas")
        return error_response(e, "❌ Error calculando estadísticas", 500)


# 🔍 RUTA: JUGADOR POR ID
@players_bp.route('/players/<int:player_id>', methods=['GET'])
def get_player(player_id):
    """
    GET /api/players/52
    Información de un jugador específico
    """
    try:
        player = get_player_service().get_player(player_id)

        return jsonify({
            "success": True,
            "player": player.to_dict(),
            "message": f"✅ Jugador {player.full_name} encontrado"
        }), 200

    except PlayerNotFoundError as e:
        return error_response(e, f"❌ Jugador {player_id} no encontrado", 404)
    except PlayerStoreError as e:
        return error_response(e, "❌ Catálogo de jugadores no disponible", 503)
    except Exception as e:
        logger.exception(f"❌ Error inesperado buscando jugador {player_id}")
        return error_response(e, "❌ Error buscando jugador", 500)


# 📝 DOCUMENTACIÓN DE RUTAS
"""
📋 RUTAS DISPONIBLES:

GET    /api/players              - Jugadores por ranking (?limit=N)
POST   /api/players              - Igual, con {"limit": N} en el cuerpo
GET    /api/players/statistics   - Estadísticas globales
GET    /api/players/<id>         - Jugador por id

🔧 EJEMPLOS DE USO:

curl http://localhost:5000/api/players?limit=2
curl -X POST http://localhost:5000/api/players \
  -H "Content-Type: application/json" \
  -d '{"limit": 2}'
curl http://localhost:5000/api/players/statistics
curl http://localhost:5000/api/players/52
"""
