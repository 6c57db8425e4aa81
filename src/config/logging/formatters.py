"""Formatters de logging.

JSON estruturado (python-json-logger) para execução normal e texto
simples para depuração local.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes curtos no JSON final
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados via `extra` (ex: status_code, route) entram no JSON
    ao lado dos campos obrigatórios.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "app.coordinators.startup.sequencer",
            "message": "bootstrap_navigated",
            "correlation_id": "5f0c...",
            "service": "coachlink",
            "route": "/screens/main/homepage"
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def create_plain_formatter() -> logging.Formatter:
    """Cria formatter de texto para terminais e testes."""
    return logging.Formatter(PLAIN_FORMAT)
