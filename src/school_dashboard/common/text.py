from __future__ import annotations

import unicodedata


def strip_accents(text: str) -> str:
    nfkd_form = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd_form if not unicodedata.combining(c))


def collation_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating a locale-aware string comparison.

    Primary strength ignores accents and case ("MARÓN" sorts with "MARON"),
    then case-folded text and finally the raw text break ties so the order
    stays total and deterministic.
    """
    value = text or ""
    folded = value.casefold()
    return strip_accents(folded), folded, value
