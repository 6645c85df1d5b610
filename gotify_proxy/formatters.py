from .constants import (
    DEFAULT_ALERT_NAME,
    DEFAULT_DESCRIPTION,
    DEFAULT_PRIORITY,
    DEFAULT_SEVERITY,
    DEFAULT_SUMMARY,
    SEVERITY_PRIORITIES,
)
from .models import AlertRecord, GotifyMessage
from .utils import format_time, get_map_value


def map_priority(severity):
    return SEVERITY_PRIORITIES.get((severity or "").lower(), DEFAULT_PRIORITY)


def build_time_line(status, starts_at, ends_at):
    start_time = format_time(starts_at)
    end_time = format_time(ends_at)
    if status == "RESOLVED" and end_time:
        return f"Resolved: {end_time}"
    return f"Triggered: {start_time}"


def build_gotify_message(alert: AlertRecord) -> GotifyMessage:
    """
    Converte um alerta do Alertmanager na mensagem do Gotify.
    Nunca levanta exceção: campos ausentes usam os valores padrão.
    """
    alert_name = get_map_value(alert.labels, "alertname", DEFAULT_ALERT_NAME)
    severity = get_map_value(alert.labels, "severity", DEFAULT_SEVERITY)
    summary = get_map_value(alert.annotations, "summary", DEFAULT_SUMMARY)
    description = get_map_value(alert.annotations, "description", DEFAULT_DESCRIPTION)
    status = (alert.status or "").upper()

    lines = [
        summary,
        description,
        build_time_line(status, alert.starts_at, alert.ends_at),
    ]
    return GotifyMessage(
        title=f"[{severity}] {alert_name} ({status})",
        message="\n".join(lines),
        priority=map_priority(severity),
    )
