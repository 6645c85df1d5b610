class ProxyError(Exception):
    """Erro base do proxy Alertmanager -> Gotify."""


class DecodeError(ProxyError):
    """Corpo recebido do Alertmanager não é JSON válido ou não tem o formato esperado."""


class SerializationError(ProxyError):
    """Mensagem do Gotify não pôde ser serializada em JSON."""


class DeliveryError(ProxyError):
    """Falha de transporte antes de receber resposta do Gotify (conexão, DNS, timeout)."""
