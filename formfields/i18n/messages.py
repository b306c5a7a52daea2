"""
Message catalog

Source (English) message templates used across the field types, plus the
built-in translations keyed by base language code. Templates use the ICU-lite
syntax understood by ``formfields.i18n.translator.format_message``.
"""

from __future__ import annotations

# ── Field-level messages ──────────────────────────────────────────────────────
CANNOT_BE_BLANK = "{attribute} cannot be blank."
SUBFIELD_CANNOT_BE_BLANK = '"{label}" cannot be blank.'
INVALID_OPTION = "{attribute} is invalid."
TOO_FEW_ROWS = "{attribute} should contain at least {min, number} {min, plural, one{row} other{rows}}."
TOO_MANY_ROWS = "{attribute} should contain at most {max, number} {max, plural, one{row} other{rows}}."

# ── Cell validator messages ───────────────────────────────────────────────────
INVALID_EMAIL = "{attribute} is not a valid email address."
INVALID_URL = "{attribute} is not a valid URL."
INVALID_COLOR = "{attribute} isn’t a valid hex color value."

# ── Labels ────────────────────────────────────────────────────────────────────
ADD_ROW = "Add row"
REMOVE_ROW = "Remove"
SELECT_AN_OPTION = "Select an option"
AM = "AM"
PM = "PM"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {},
    "fr": {
        CANNOT_BE_BLANK: "{attribute} ne peut pas être vide.",
        SUBFIELD_CANNOT_BE_BLANK: "« {label} » ne peut pas être vide.",
        INVALID_OPTION: "{attribute} est invalide.",
        TOO_FEW_ROWS: "{attribute} doit contenir au moins {min, number} {min, plural, one{ligne} other{lignes}}.",
        TOO_MANY_ROWS: "{attribute} doit contenir au plus {max, number} {max, plural, one{ligne} other{lignes}}.",
        INVALID_EMAIL: "{attribute} n’est pas une adresse e-mail valide.",
        INVALID_URL: "{attribute} n’est pas une URL valide.",
        INVALID_COLOR: "{attribute} n’est pas une couleur hexadécimale valide.",
        ADD_ROW: "Ajouter une ligne",
        REMOVE_ROW: "Supprimer",
        SELECT_AN_OPTION: "Sélectionnez une option",
    },
    "de": {
        CANNOT_BE_BLANK: "{attribute} darf nicht leer sein.",
        SUBFIELD_CANNOT_BE_BLANK: "„{label}“ darf nicht leer sein.",
        INVALID_OPTION: "{attribute} ist ungültig.",
        TOO_FEW_ROWS: "{attribute} muss mindestens {min, number} {min, plural, one{Zeile} other{Zeilen}} enthalten.",
        TOO_MANY_ROWS: "{attribute} darf höchstens {max, number} {max, plural, one{Zeile} other{Zeilen}} enthalten.",
        INVALID_EMAIL: "{attribute} ist keine gültige E-Mail-Adresse.",
        INVALID_URL: "{attribute} ist keine gültige URL.",
        INVALID_COLOR: "{attribute} ist kein gültiger Hex-Farbwert.",
        ADD_ROW: "Zeile hinzufügen",
        REMOVE_ROW: "Entfernen",
        SELECT_AN_OPTION: "Option auswählen",
    },
}
