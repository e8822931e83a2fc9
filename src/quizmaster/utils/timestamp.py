"""Utilitaires pour la gestion des horodatages (ISO-8601 UTC pour les enregistrements, millisecondes pour les identifiants)."""

from datetime import UTC, datetime


def now_iso() -> str:
    """Retourne la date/heure actuelle en UTC au format ISO-8601."""
    return datetime.now(UTC).isoformat()

def now_ms() -> int:
    """Retourne le timestamp actuel en millisecondes depuis l'époque Unix."""
    return int(datetime.now(UTC).timestamp() * 1000)
