"""
Parsing tolerant des dates textuelles TMDB.

Les formats sont essayes dans l'ordre de priorite, le premier qui reussit
l'emporte. Un texte absent, vide ou illisible donne None, jamais une erreur.
"""

from datetime import date, datetime
from typing import Optional, Sequence

# Ordre de priorite: date simple (cas nominal TMDB), horodatages ISO, puis
# precisions partielles
DEFAULT_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m",
    "%Y",
)


def parse_date(
    text: Optional[str],
    formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> Optional[date]:
    """
    Convertit un texte de date en date calendaire.

    Args:
        text: Texte brut (ex: "2009-12-15"), ou None
        formats: Formats strptime a essayer, par ordre de priorite

    Returns:
        La date du premier format qui correspond, None sinon
    """
    if not text:
        return None
    text = text.strip()
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None
