"""Departure message catalog tables.

This module holds the read-only code tables for departure messages:
display texts, type prefixes and supersession rules. Tables are built
once at import time and wrapped so callers cannot mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from core.types import MessageCategory

_MESSAGE_TEXTS = {
    "2": "Polizeiliche Ermittlung",
    "3": "Feuerwehreinsatz neben der Strecke",
    "5": "Ärztliche Versorgung eines Fahrgastes",
    "6": "Betätigen der Notbremse",
    "7": "Personen im Gleis",
    "8": "Notarzteinsatz am Gleis",
    "9": "Streikauswirkungen",
    "10": "Ausgebrochene Tiere im Gleis",
    "11": "Unwetter",
    "12": "Warten auf Fahrgäste aus einem Schiff",
    "13": "Pass- und Zollkontrolle",
    "15": "Beeinträchtigung durch Vandalismus",
    "16": "Entschärfung einer Fliegerbombe",
    "17": "Beschädigung einer Brücke",
    "18": "Umgestürzter Baum im Gleis",
    "19": "Unfall an einem Bahnübergang",
    "20": "Tiere im Gleis",
    "21": "Warten auf weitere Reisende",
    "22": "Witterungsbedingte Störung",
    "23": "Feuerwehreinsatz auf Bahngelände",
    "24": "Verspätung aus dem Ausland",
    "25": "Warten auf verspätete Zugteile",
    "28": "Gegenstände im Gleis",
    "31": "Bauarbeiten",
    "32": "Verzögerung beim Ein-/Ausstieg",
    "33": "Oberleitungsstörung",
    "34": "Signalstörung",
    "35": "Streckensperrung",
    "36": "Technische Störung am Zug",
    "38": "Technische Störung an der Strecke",
    "39": "Anhängen von zusätzlichen Wagen",
    "40": "Stellwerksstörung/-ausfall",
    "41": "Störung an einem Bahnübergang",
    "42": "Außerplanmäßige Geschwindigkeitsbeschränkung",
    "43": "Verspätung eines vorausfahrenden Zuges",
    "44": "Warten auf einen entgegenkommenden Zug",
    "45": "Überholung durch anderen Zug",
    "46": "Warten auf freie Einfahrt",
    "47": "Verspätete Bereitstellung",
    "48": "Verspätung aus vorheriger Fahrt",
    "55": "Technische Störung an einem anderen Zug",
    "56": "Warten auf Fahrgäste aus einem Bus",
    "57": "Zusätzlicher Halt",
    "58": "Umleitung",
    "59": "Schnee und Eis",
    "60": "Reduzierte Geschwindigkeit wegen Sturm",
    "61": "Türstörung",
    "62": "Behobene technische Störung am Zug",
    "63": "Technische Untersuchung am Zug",
    "64": "Weichenstörung",
    "65": "Erdrutsch",
    "70": "Kein WLAN",
    "71": "WLAN in einzelnen Wagen nicht verfügbar",
    "73": "Mehrzweckabteil vorne",
    "74": "Mehrzweckabteil hinten",
    "75": "1. Klasse vorne",
    "76": "1. Klasse hinten",
    "77": "Ohne 1. Klasse",
    "79": "Ohne Mehrzweckabteil",
    "80": "Abweichende Wagenreihung",
    "82": "Mehrere Wagen fehlen",
    "83": "Fehlender Zugteil",
    "84": "Zug verkehrt richtig gereiht",
    "85": "Ein Wagen fehlt",
    "86": "Keine Reservierungsanzeige",
    "87": "Einzelne Wagen ohne Reservierungsanzeige",
    "88": "Keine Qualitätsmängel",
    "89": "Reservierungen sind wieder vorhanden",
    "90": "Kein Bordrestaurant/Bordbistro",
    "91": "Eingeschränkte Fahrradmitnahme",
    "92": "Klimaanlage in einzelnen Wagen ausgefallen",
    "93": "Fehlende oder gestörte behindertengerechte Einrichtung",
    "94": "Ersatzbewirtschaftung",
    "95": "Ohne behindertengerechtes WC",
    "96": "Der Zug ist stark überbesetzt",
    "97": "Der Zug ist überbesetzt",
    "98": "Sonstige Qualitätsmängel",
    "99": "Verzögerungen im Betriebsablauf",
    "900": "Anschlussbus wartet(?)",
}

# Meaning not confirmed; texts are shown as-is.
_UNCERTAIN_CODES = frozenset({"55", "58", "900"})

_MESSAGE_TYPES = {
    "d": MessageCategory.DELAY,
    "f": MessageCategory.QOS,
    "q": MessageCategory.QOS,
}

_SUPERSEDED_MESSAGES = {
    "84": ("80", "82", "83", "85"),
    "88": ("80", "82", "83", "85", "86", "87", "90", "91", "92", "93", "96", "97", "98"),
    "96": ("97",),
    "97": ("96",),
}


@dataclass(frozen=True)
class MessageCatalog:
    """Read-only message tables used by the message normalizer.

    Attributes:
        texts: Code to display text.
        types: One-character type prefix to message category.
        superseded: Code to the codes it makes redundant when both are present.
        uncertain_codes: Codes whose text meaning is not confirmed.
    """

    texts: Mapping[str, str]
    types: Mapping[str, MessageCategory]
    superseded: Mapping[str, tuple[str, ...]]
    uncertain_codes: frozenset[str]


def build_catalog(
    texts: Mapping[str, str],
    types: Mapping[str, MessageCategory],
    superseded: Mapping[str, tuple[str, ...]],
    uncertain_codes: frozenset[str],
) -> MessageCatalog:
    """Build a catalog with read-only table views.

    Args:
        texts: Code to display text.
        types: Type prefix to category.
        superseded: Code to superseded codes.
        uncertain_codes: Codes with unconfirmed meaning.

    Returns:
        Immutable message catalog.
    """
    return MessageCatalog(
        texts=MappingProxyType(dict(texts)),
        types=MappingProxyType(dict(types)),
        superseded=MappingProxyType({code: tuple(rows) for code, rows in superseded.items()}),
        uncertain_codes=frozenset(uncertain_codes),
    )


DEFAULT_MESSAGE_CATALOG = build_catalog(
    texts=_MESSAGE_TEXTS,
    types=_MESSAGE_TYPES,
    superseded=_SUPERSEDED_MESSAGES,
    uncertain_codes=_UNCERTAIN_CODES,
)
