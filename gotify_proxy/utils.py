import re
from datetime import datetime
from typing import Mapping, Optional

from .constants import DISPLAY_TIME_FORMAT, ZERO_TIMESTAMP

# RFC 3339: fuso obrigatório (Z ou ±HH:MM), fração de segundos opcional
_RFC3339_RE = re.compile(
    r'^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$'
)


def get_map_value(mapping: Optional[Mapping[str, str]], key: str, default: str) -> str:
    """Busca `key` no mapa; retorna `default` se o mapa ou a chave não existirem."""
    if not mapping:
        return default
    value = mapping.get(key)
    if value is None:
        return default
    return value


def parse_rfc3339(value: str) -> Optional[datetime]:
    match = _RFC3339_RE.match(value or "")
    if not match:
        return None
    base, fraction, tz = match.groups()
    # datetime suporta no máximo microssegundos; Alertmanager envia nanossegundos
    micro = (fraction or "")[:6].ljust(6, "0")
    tz = "+00:00" if tz == "Z" else tz
    try:
        return datetime.fromisoformat(f"{base}.{micro}{tz}")
    except ValueError:
        return None


def format_time(timestamp_str: str) -> str:
    """
    Converte um timestamp RFC 3339 para hora local no formato YYYY-MM-DD HH:MM:SS.

    O sentinela de instante zero vira string vazia (não aplicável). Qualquer valor
    que não possa ser interpretado é devolvido sem alterações.
    """
    if timestamp_str == ZERO_TIMESTAMP:
        return ""
    parsed = parse_rfc3339(timestamp_str)
    if parsed is None:
        return timestamp_str
    try:
        return parsed.astimezone().strftime(DISPLAY_TIME_FORMAT)
    except (OverflowError, ValueError, OSError):
        # datas nos limites do calendário podem estourar na conversão para hora local
        return timestamp_str
