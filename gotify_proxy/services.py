import json
import logging

import requests

from .errors import DeliveryError, SerializationError
from .models import GotifyMessage

logger = logging.getLogger(__name__)


def build_message_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/message"


def send_gotify_message(message: GotifyMessage, base_url: str, token: str, timeout: float = 10.0) -> int:
    """
    Envia a mensagem para o Gotify (POST {base_url}/message?token=...).

    Retorna o status HTTP recebido, qualquer que seja (4xx/5xx inclusive).
    Levanta SerializationError se o corpo não puder ser gerado e DeliveryError
    se a requisição falhar antes de haver resposta.
    """
    try:
        # escapes \uXXXX deixam o corpo em ASCII, inclusive surrogates soltos vindos do webhook
        body = json.dumps(message.to_payload()).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"falha ao serializar mensagem: {exc}") from exc

    try:
        resp = requests.post(
            build_message_url(base_url),
            params={"token": token},
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise DeliveryError(f"falha ao enviar requisição: {exc}") from exc

    logger.debug("Gotify response: %s %s", resp.status_code, resp.text[:500])
    return resp.status_code
