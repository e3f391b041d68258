# cli.py - Consultas del catálogo de jugadores desde la terminal
#
#   python cli.py list --limit 3
#   python cli.py show 52
#   python cli.py stats
#   python cli.py seed-db --source data/players.json
#   python cli.py serve

import argparse
import json
import logging
import sys

from analysis.exceptions import PlayerStatsError
from config import load_config, setup_logging
from services import PlayerService
from stores import STORE_TYPES, JsonFilePlayerStore, PlayerStoreError, SqlitePlayerStore, build_store

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description='Catálogo de jugadores de tenis y estadísticas')
    parser.add_argument('--store', choices=STORE_TYPES, help='Store de jugadores')
    parser.add_argument('--players-file', help='Archivo JSON de jugadores')
    parser.add_argument('--database', help='Ruta de la base SQLite')

    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='Jugadores ordenados por ranking')
    list_parser.add_argument('--limit', type=int, help='Máximo de jugadores (sin límite por defecto)')

    show_parser = subparsers.add_parser('show', help='Jugador por id')
    show_parser.add_argument('player_id', type=int)

    subparsers.add_parser('stats', help='Estadísticas globales')

    seed_parser = subparsers.add_parser('seed-db', help='Cargar jugadores JSON en SQLite')
    seed_parser.add_argument('--source', help='Archivo JSON de origen (default: PLAYERS_FILE)')

    subparsers.add_parser('serve', help='Iniciar la API Flask')
    return parser


def settings_from_args(args, environ=None):
    settings = load_config(environ)
    if args.store:
        settings['STORE_TYPE'] = args.store
    if args.players_file:
        settings['PLAYERS_FILE'] = args.players_file
    if args.database:
        settings['DATABASE_PATH'] = args.database
    return settings


def print_json(payload):
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def seed_database(settings, source=None):
    source = source or settings['PLAYERS_FILE']
    players = JsonFilePlayerStore(source).all_records()
    store = SqlitePlayerStore(settings['DATABASE_PATH'])
    store.init_db()
    saved = store.seed_from_records(players)
    return {'source': str(source), 'database': store.db_path, 'saved': saved, 'total': store.count()}


def run(argv=None, environ=None):
    """Ejecutar el comando indicado. Devuelve el código de salida."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args, environ)
    setup_logging(settings['LOG_LEVEL'])

    if args.command == 'serve':
        from app import create_app
        app = create_app(settings)
        app.run(host=settings['HOST'], port=settings['PORT'], debug=settings['DEBUG'])
        return 0

    try:
        if args.command == 'seed-db':
            print_json(seed_database(settings, args.source))
            return 0

        service = PlayerService(build_store(settings))
        if args.command == 'list':
            print_json([player.to_dict() for player in service.list_players(args.limit)])
        elif args.command == 'show':
            print_json(service.get_player(args.player_id).to_dict())
        elif args.command == 'stats':
            print_json(service.get_statistics().to_dict())
        return 0

    except (PlayerStatsError, PlayerStoreError) as e:
        logger.error(f"❌ {e}")
        return 1


if __name__ == '__main__':
    sys.exit(run())
