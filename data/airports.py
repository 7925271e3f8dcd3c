"""Place-name tables for the city canonicalizer.

AENA publishes destination names in Spanish; the catalog is published in English.
Keys are upper-case Spanish tokens, values the English token. Multi-word names are
translated token by token ("NUEVA YORK" -> "New York").
"""

from types import MappingProxyType

CITY_TRANSLATIONS = MappingProxyType(
    {
        "LONDRES": "London",
        "MILAN": "Milan",
        "MUNICH": "Munich",
        "COLONIA": "Cologne",
        "FRANCFORT": "Frankfurt",
        "HAMBURGO": "Hamburg",
        "HANNOVER": "Hanover",
        "NUREMBERG": "Nuremberg",
        "NUREMBERGA": "Nuremberg",
        "DUSSELDORF": "Düsseldorf",
        "SARREBRUCK": "Saarbrücken",
        "GINEBRA": "Geneva",
        "BASILEA": "Basel",
        "ZURICH": "Zurich",
        "ESTOCOLMO": "Stockholm",
        "COPENHAGUE": "Copenhagen",
        "GOTEMBURGO": "Gothenburg",
        "BRUSELAS": "Brussels",
        "AMBERES": "Antwerp",
        "LUXEMBURGO": "Luxembourg",
        "ROMA": "Rome",
        "VENECIA": "Venice",
        "NAPOLES": "Naples",
        "TURIN": "Turin",
        "FLORENCIA": "Florence",
        "GENOVA": "Genoa",
        "BOLONIA": "Bologna",
        "LISBOA": "Lisbon",
        "OPORTO": "Porto",
        "ATENAS": "Athens",
        "VIENA": "Vienna",
        "VARSOVIA": "Warsaw",
        "CRACOVIA": "Krakow",
        "PRAGA": "Prague",
        "EDIMBURGO": "Edinburgh",
        "ESTAMBUL": "Istanbul",
        "MOSCU": "Moscow",
        "MARRAKECH": "Marrakesh",
        "TANGER": "Tangier",
        "ARGEL": "Algiers",
        "NUEVA": "New",
        "YORK": "York",
        "BURDEOS": "Bordeaux",
        "MARSELLA": "Marseille",
        "NIZA": "Nice",
        "TOLOSA": "Toulouse",
        "ESTRASBURGO": "Strasbourg",
        "BERNA": "Bern",
    }
)

# Spanish "of / the / from"; kept lower case unless they open the name.
LINKING_WORDS = frozenset({"de", "del", "la", "las", "los", "el", "desde"})

# Airport names that are not places; "LONDRES /GATWICK" publishes as "London".
AIRPORT_ONLY_NAMES = frozenset(
    {
        "HEATHROW",
        "GATWICK",
        "STANSTED",
        "CHARLES DE GAULLE",
        "ORLY",
        "SCHIPHOL",
        "MALPENSA",
        "LINATE",
        "ORIO AL SERIO",
        "BARAJAS",
        "EL PRAT",
        "TEGEL",
        "SCHONEFELD",
        "BRANDENBURG",
        "KASTRUP",
        "ARLANDA",
        "GARDERMOEN",
        "ZAVENTEM",
        "VNUKOVO",
        "SHEREMETYEVO",
    }
)

# Trailing qualifiers on a sub-airport segment ("LONDON CITY APT.").
AIRPORT_SUFFIXES = ("AEROPUERTO", "AIRPORT", "AEROP.", "APTO.", "APT.", "APT")
