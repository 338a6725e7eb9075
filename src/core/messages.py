"""User-facing message catalog (English/Spanish).

Verbose diagnostics stay in English and are not part of the catalog; only the
lines every user sees (countdown, start, errors) are translated.
"""

from __future__ import annotations

from typing import Any

from core.domain.language import Language

_MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "outage_started": "Outage started!",
        "outage_starting_in": "Outage starting in {countdown}...",
        "error_id_or_active": "You must use --outageid=<id> or --active but not both.",
        "error_invalid_value": "Invalid value for parameter: {param}",
        "error_invalid_sleep": "Sleep must be a positive number of seconds.",
        "error_not_found": "Outage not found.",
        "error_changed": "Outage #{id} changed while waiting.",
        "error_ended": "Outage #{id} has already ended.",
        "error_store": "Cannot load outage store {path}: {reason}",
        "now": "now",
        "year": "year",
        "years": "years",
        "day": "day",
        "days": "days",
        "hour": "hour",
        "hours": "hours",
        "min": "min",
        "mins": "mins",
        "sec": "sec",
        "secs": "secs",
    },
    Language.SPANISH: {
        "outage_started": "¡La interrupción ha comenzado!",
        "outage_starting_in": "La interrupción comienza en {countdown}...",
        "error_id_or_active": "Debe usar --outageid=<id> o --active, pero no ambos.",
        "error_invalid_value": "Valor inválido para el parámetro: {param}",
        "error_invalid_sleep": "La espera debe ser un número positivo de segundos.",
        "error_not_found": "No se encontró la interrupción.",
        "error_changed": "La interrupción #{id} cambió durante la espera.",
        "error_ended": "La interrupción #{id} ya ha terminado.",
        "error_store": "No se puede cargar el almacén de interrupciones {path}: {reason}",
        "now": "ahora",
        "year": "año",
        "years": "años",
        "day": "día",
        "days": "días",
        "hour": "hora",
        "hours": "horas",
        "min": "min",
        "mins": "mins",
        "sec": "seg",
        "secs": "segs",
    },
}


def get_message(key: str, language: Language = Language.ENGLISH, **params: Any) -> str:
    """Look up `key` for `language`, falling back to English, and format it."""

    template = _MESSAGES.get(language, {}).get(key) or _MESSAGES[Language.ENGLISH][key]
    return template.format(**params) if params else template
