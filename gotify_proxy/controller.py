import json
import logging
from typing import Callable, List, Optional

from flask import Flask, request

from .constants import DEFAULT_ALERT_NAME, Settings
from .errors import DecodeError, DeliveryError, SerializationError
from .formatters import build_gotify_message
from .models import AlertBatch, DeliveryResult, GotifyMessage, decode_payload
from .services import send_gotify_message
from .utils import get_map_value

logger = logging.getLogger(__name__)

Sender = Callable[[GotifyMessage], int]


def process_batch(batch: AlertBatch, send: Sender) -> List[DeliveryResult]:
    """
    Formata e envia cada alerta do lote, em ordem.
    Falha em um alerta é registrada e não interrompe os demais.
    """
    results = []
    for alert in batch.alerts:
        alert_name = get_map_value(alert.labels, "alertname", DEFAULT_ALERT_NAME)
        message = build_gotify_message(alert)
        try:
            status_code = send(message)
        except (SerializationError, DeliveryError) as exc:
            logger.error("Falha ao enviar alerta %s para o Gotify: %s", alert_name, exc)
            results.append(DeliveryResult(alert_name, error=exc))
            continue

        if 200 <= status_code < 300:
            logger.info("Alerta %s enviado, status: %s", alert_name, status_code)
        else:
            logger.warning("Gotify respondeu %s para o alerta %s", status_code, alert_name)
        results.append(DeliveryResult(alert_name, status_code=status_code))
    return results


def create_app(settings: Optional[Settings] = None):
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config['PROXY_SETTINGS'] = settings

    def send(message: GotifyMessage) -> int:
        if settings.debug_mode:
            logger.debug("Payload Gotify: %s", json.dumps(message.to_payload())[:500])
        return send_gotify_message(
            message,
            settings.gotify_url,
            settings.gotify_token,
            timeout=settings.timeout_seconds,
        )

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'alertmanager-gotify-proxy'}, 200

    @app.route('/webhook', methods=['POST'])
    def webhook():
        raw = request.get_data()
        try:
            batch = decode_payload(raw)
        except DecodeError as exc:
            logger.warning("Falha ao interpretar webhook: %s", exc)
            return f'failed to parse request: {exc}', 400

        logger.debug("Lote recebido: status=%s alerts=%d", batch.status, len(batch.alerts))
        results = process_batch(batch, send)
        failed = sum(1 for r in results if not r.ok)
        if failed:
            logger.warning("%d de %d alertas não foram entregues", failed, len(results))

        # Alertmanager sempre recebe 200 depois que o payload é interpretado
        return 'ok', 200

    return app
