import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Configurações globais de ambiente (lidas uma vez na inicialização)
GOTIFY_URL = os.getenv("GOTIFY_URL") or "http://localhost:8080"
GOTIFY_TOKEN = os.getenv("GOTIFY_TOKEN") or "your-token-here"
LISTEN_PORT = int(os.getenv("LISTEN_PORT") or "8081")
GOTIFY_TIMEOUT_SECONDS = float(os.getenv("GOTIFY_TIMEOUT_SECONDS") or "10")
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Sentinela do Alertmanager para "ainda não resolvido" (instante zero)
ZERO_TIMESTAMP = "0001-01-01T00:00:00Z"
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_ALERT_NAME = "unknown"
DEFAULT_SEVERITY = "unknown"
DEFAULT_SUMMARY = "no summary"
DEFAULT_DESCRIPTION = "no details"

# Prioridades do Gotify (1-10)
DEFAULT_PRIORITY = 5
SEVERITY_PRIORITIES = {
    "critical": 8,
    "warning": 5,
    "info": 3,
}


@dataclass(frozen=True)
class Settings:
    """Configuração imutável do proxy, passada para create_app()."""

    gotify_url: str = "http://localhost:8080"
    gotify_token: str = "your-token-here"
    listen_port: int = 8081
    timeout_seconds: float = 10.0
    debug_mode: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Monta a configuração a partir de variáveis de ambiente.
        Sem `environ`, usa os valores lidos no import deste módulo.
        """
        if environ is None:
            return cls(
                gotify_url=GOTIFY_URL,
                gotify_token=GOTIFY_TOKEN,
                listen_port=LISTEN_PORT,
                timeout_seconds=GOTIFY_TIMEOUT_SECONDS,
                debug_mode=DEBUG_MODE,
            )
        return cls(
            gotify_url=environ.get("GOTIFY_URL") or cls.gotify_url,
            gotify_token=environ.get("GOTIFY_TOKEN") or cls.gotify_token,
            listen_port=int(environ.get("LISTEN_PORT") or cls.listen_port),
            timeout_seconds=float(environ.get("GOTIFY_TIMEOUT_SECONDS") or cls.timeout_seconds),
            debug_mode=(environ.get("DEBUG_MODE") or "False").lower() == "true",
        )
