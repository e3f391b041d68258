# utils/request_logging.py - Log de entrada y salida de cada petición HTTP

import time
import logging

from flask import g, request

logger = logging.getLogger(__name__)


def get_client_ip(req):
    """IP del cliente; con proxy se usa la última de X-Forwarded-For."""
    forwarded = req.headers.get('X-Forwarded-For')
    if forwarded:
        ip = forwarded.split(',')[-1].strip()
    else:
        ip = req.remote_addr or ''
    return ip.replace('::ffff:', '')


def init_request_logging(app):
    """Registrar los hooks before/after request en la aplicación."""

    @app.before_request
    def log_incoming_request():
        g.request_started_at = time.perf_counter()
        logger.info(
            f"➡️ Incoming Request on {request.path} "
            f"method={request.method} ip={get_client_ip(request)}"
        )

    @app.after_request
    def log_end_request(response):
        started = g.get('request_started_at')
        duration_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info(
            f"⬅️ End Request for {request.path} "
            f"method={request.method} ip={get_client_ip(request)} "
            f"status={response.status_code} duration={duration_ms:.0f}ms"
        )
        return response

    return app
