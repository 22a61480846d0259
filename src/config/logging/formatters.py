"""Formatters de logging estruturado.

Todo log sai como uma linha JSON com os campos obrigatórios abaixo;
campos passados via `extra` são anexados ao objeto.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
        "environment",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-15 10:30:00,123",
            "level": "INFO",
            "logger": "app.infra.http.client",
            "message": "outbound_call_completed",
            "correlation_id": "abc-123",
            "service": "printora_relay",
            "environment": "production",
            "status_code": 200
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
