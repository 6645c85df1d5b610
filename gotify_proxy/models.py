import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import DecodeError


@dataclass(frozen=True)
class AlertRecord:
    status: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)
    annotations: Mapping[str, str] = field(default_factory=dict)
    starts_at: str = ""
    ends_at: str = ""


@dataclass(frozen=True)
class AlertBatch:
    status: str = ""
    alerts: Tuple[AlertRecord, ...] = ()
    version: str = ""


@dataclass(frozen=True)
class GotifyMessage:
    title: str
    message: str
    priority: int

    def to_payload(self) -> Dict[str, Any]:
        return {"title": self.title, "message": self.message, "priority": self.priority}


def _string_field(data: Dict, key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{where}.{key}: esperado string, recebido {type(value).__name__}")
    return value


def _string_map(data: Dict, key: str, where: str) -> Dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"{where}.{key}: esperado objeto, recebido {type(value).__name__}")
    for k, v in value.items():
        # null dentro do mapa vira string vazia, igual ao Alertmanager
        if v is not None and not isinstance(v, str):
            raise DecodeError(f"{where}.{key}.{k}: esperado string, recebido {type(v).__name__}")
    return {k: (v or "") for k, v in value.items()}


def _decode_alert(data: Any, index: int) -> AlertRecord:
    where = f"alerts[{index}]"
    if not isinstance(data, dict):
        raise DecodeError(f"{where}: esperado objeto, recebido {type(data).__name__}")
    return AlertRecord(
        status=_string_field(data, "status", where),
        labels=_string_map(data, "labels", where),
        annotations=_string_map(data, "annotations", where),
        starts_at=_string_field(data, "startsAt", where),
        ends_at=_string_field(data, "endsAt", where),
    )


def decode_payload(raw: Optional[bytes]) -> AlertBatch:
    """
    Converte o corpo do webhook do Alertmanager em AlertBatch.

    Apenas a estrutura é validada (tipos de objeto/lista/string); campos ausentes
    ou nulos viram valores vazios e são tratados adiante pelo formatador.
    Levanta DecodeError se o corpo não for JSON ou não tiver o formato esperado.
    """
    try:
        data = json.loads(raw or b"")
    except (ValueError, UnicodeDecodeError) as exc:
        raise DecodeError(f"JSON inválido: {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError(f"esperado objeto JSON, recebido {type(data).__name__}")

    alerts = data.get("alerts")
    if alerts is None:
        alerts = []
    if not isinstance(alerts, list):
        raise DecodeError(f"alerts: esperado lista, recebido {type(alerts).__name__}")

    return AlertBatch(
        status=_string_field(data, "status", "payload"),
        alerts=tuple(_decode_alert(a, i) for i, a in enumerate(alerts)),
        version=_string_field(data, "version", "payload"),
    )


@dataclass
class DeliveryResult:
    """Resultado do envio de um alerta do lote."""

    alert_name: str
    status_code: Optional[int] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
