# models/database.py - Configuración y manejo de base de datos SQLite
# Tabla de jugadores del catálogo (solo lectura para la API)

import json
import sqlite3
import logging
from datetime import datetime

from models.player import PlayerRecord

# 📍 CONFIGURACIÓN DE LA BASE DE DATOS
DATABASE_PATH = 'tennis_players.db'

logger = logging.getLogger(__name__)

PLAYER_COLUMNS = (
    'id', 'firstname', 'lastname', 'shortname', 'sex',
    'country_code', 'country_picture', 'picture',
    'rank', 'points', 'weight', 'height', 'age', 'last_results',
)


def get_db(db_path=DATABASE_PATH):
    """
    Obtener conexión a la base de datos
    Las filas se pueden leer por nombre de columna
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path=DATABASE_PATH):
    """
    Inicializar base de datos y crear la tabla de jugadores
    Se ejecuta al iniciar la aplicación con el store 'sqlite'
    """
    logger.info(f"🔧 Inicializando base de datos: {db_path}")

    conn = get_db(db_path)
    try:
        # 🎾 TABLA DE JUGADORES
        conn.execute('''
            CREATE TABLE IF NOT EXISTS players (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id INTEGER NOT NULL UNIQUE,
                firstname TEXT NOT NULL,
                lastname TEXT NOT NULL,
                shortname TEXT,
                sex TEXT,
                country_code TEXT NOT NULL,
                country_picture TEXT,
                picture TEXT,
                rank INTEGER NOT NULL,
                points INTEGER DEFAULT 0,
                weight REAL,
                height REAL,
                age INTEGER,
                last_results TEXT DEFAULT '[]',
                last_updated TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')
        conn.commit()
        logger.info("✅ Tabla 'players' lista")
    finally:
        conn.close()


def player_to_row(player):
    """Aplanar un PlayerRecord en la tupla de columnas de la tabla."""
    return (
        player.id,
        player.firstname,
        player.lastname,
        player.shortname,
        player.sex,
        player.country.code,
        player.country.picture,
        player.picture,
        player.data.rank,
        player.data.points,
        player.data.weight,
        player.data.height,
        player.data.age,
        json.dumps(list(player.data.last)),
    )


def row_to_player(row):
    """Reconstruir un PlayerRecord desde una fila de la tabla."""
    return PlayerRecord.from_dict({
        'id': row['id'],
        'firstname': row['firstname'],
        'lastname': row['lastname'],
        'shortname': row['shortname'] or '',
        'sex': row['sex'] or '',
        'country': {'code': row['country_code'], 'picture': row['country_picture']},
        'picture': row['picture'],
        'data': {
            'rank': row['rank'],
            'points': row['points'],
            'weight': row['weight'],
            'height': row['height'],
            'age': row['age'],
            'last': json.loads(row['last_results'] or '[]'),
        },
    })


def insert_player(conn, player):
    """
    Insertar o reemplazar un jugador (por id)
    No hace commit: el llamador agrupa las inserciones
    """
    placeholders = ', '.join('?' for _ in PLAYER_COLUMNS)
    conn.execute(
        f"INSERT OR REPLACE INTO players ({', '.join(PLAYER_COLUMNS)}, last_updated) "
        f"VALUES ({placeholders}, ?)",
        player_to_row(player) + (datetime.now().isoformat(sep=" "),),
    )
    logger.debug(f"✅ Jugador guardado: {player.full_name} (ID: {player.id})")


def get_all_players(db_path=DATABASE_PATH):
    """
    Obtener todos los jugadores en orden de inserción
    """
    conn = get_db(db_path)
    try:
        rows = conn.execute(
            f"SELECT {', '.join(PLAYER_COLUMNS)} FROM players ORDER BY seq"
        ).fetchall()
        return [row_to_player(row) for row in rows]
    finally:
        conn.close()


def count_players(db_path=DATABASE_PATH):
    conn = get_db(db_path)
    try:
        return conn.execute("SELECT COUNT(*) FROM players").fetchone()[0]
    finally:
        conn.close()
