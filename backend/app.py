# app.py - Punto de entrada de la aplicación Flask
# API de solo lectura del catálogo de jugadores de tenis

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from config import load_config, setup_logging
from routes.players import players_bp
from services import PlayerService
from stores import build_store
from utils.request_logging import init_request_logging

logger = logging.getLogger(__name__)

API_VERSION = "1.0"


def create_app(config=None, store=None):
    """
    Crear y configurar la aplicación Flask.

    Args:
        config: Valores que sobreescriben la configuración del entorno
        store: Store de jugadores ya construido (si no, se crea según STORE_TYPE)
    """
    settings = load_config()
    if config:
        settings.update(config)

    setup_logging(settings['LOG_LEVEL'])

    # 1. CREAR Y CONFIGURAR LA APLICACIÓN FLASK
    app = Flask(__name__)
    app.config.update(settings)
    CORS(app)  # Habilita CORS para permitir peticiones desde un frontend

    # 2. STORE Y SERVICIO DE JUGADORES
    if store is None:
        store = build_store(app.config)
    app.extensions['player_store'] = store
    app.extensions['player_service'] = PlayerService(store)

    # 3. RUTAS Y LOG DE PETICIONES
    app.register_blueprint(players_bp, url_prefix='/api')
    init_request_logging(app)

    @app.route('/')
    def index():
        """Ruta de bienvenida con información del sistema."""
        return jsonify({
            "message": "🎾 ¡Bienvenido a la API de jugadores de tenis!",
            "status": "online",
            "version": API_VERSION,
            "available_endpoints": [
                "GET /",
                "GET /health",
                "GET|POST /api/players",
                "GET /api/players/statistics",
                "GET /api/players/<id>"
            ]
        })

    @app.route('/health')
    def health_check():
        """Health check del servicio y del store configurado."""
        return jsonify({
            "status": "healthy",
            "service": "tennis_players_api",
            "version": API_VERSION,
            "components": {
                "flask_app": "running",
                "cors": "enabled",
                "store": type(app.extensions['player_store']).__name__,
                "store_type": app.config['STORE_TYPE']
            },
            "message": "🎾 API operativa y saludable"
        })

    logger.info(f"✅ Aplicación creada (store={app.config['STORE_TYPE']})")
    return app


def main():
    """Función principal para iniciar la aplicación."""
    app = create_app()

    logger.info("=" * 60)
    logger.info("🚀 INICIANDO TENNIS PLAYERS API")
    logger.info("=" * 60)
    logger.info(f"📍 Servidor: http://{app.config['HOST']}:{app.config['PORT']}")
    logger.info(f"💾 Store: {app.config['STORE_TYPE']}")

    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'])


if __name__ == '__main__':
    main()
