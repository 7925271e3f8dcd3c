"""Airline lookup tables used by the airline canonicalizer.

Raw names on the AENA listing are registered company names in upper case
("DEUTSCHE LUFTHANSA AG", "TUIFLY GMBH, LANGENHAGEN"). These tables are read-only;
extend them rather than adding special cases to `src/airline_names.py`.
"""

from types import MappingProxyType

# German company form; the marker and whatever follows it (", LANGENHAGEN") are dropped.
GERMAN_COMPANY_MARKER = "GMBH"

# Checked against the end of the label, longest first.
LEGAL_FORMS = (
    "SP. Z O.O.",
    "S.P.A.",
    "S.A.U.",
    "S.R.L.",
    "D.O.O.",
    "S.A.",
    "S.L.",
    "N.V.",
    "B.V.",
    "C.V.",
    "A/S",
    "CORPORATION",
    "LIMITED",
    "CORP.",
    "CORP",
    "LTD.",
    "LTD",
    "INC.",
    "INC",
    "PLC",
    "PJSC",
    "JSC",
    "LLC",
    "DAC",
    "SAU",
    "SPA",
    "SRL",
    "ASA",
    "OYJ",
    "KFT",
    "LDA",
    "SA",
    "SL",
    "AG",
    "AS",
    "AB",
    "NV",
    "BV",
    "OY",
    "KG",
)

# Exact phrases only. Generic words such as "AIR" or "AIRLINES" stay: they belong to real brands.
NOISE_PHRASES = (
    "LINEAS AEREAS DEL MEDITERRANEO",
    "LINEAS AEREAS DE ESPAÑA",
    "LINEAS AEREAS DE ESPANA",
    "LINEAS AEREAS",
    "AIRLINE COMPANY",
)

# Historical or registered names that do not look like the brand they fly as.
OVERRIDES = MappingProxyType(
    {
        "SCANDINAVIAN AIRLINES SYSTEM": "SAS",
        "SCANDINAVIAN AIRLINES": "SAS",
        "DEUTSCHE LUFTHANSA": "Lufthansa",
        "KLM ROYAL DUTCH AIRLINES": "KLM",
        "KONINKLIJKE LUCHTVAART MAATSCHAPPIJ": "KLM",
        "TRANSPORTES AEREOS PORTUGUESES": "TAP Air Portugal",
        "CONDOR FLUGDIENST": "Condor",
        "GERMANIA FLUGGESELLSCHAFT": "Germania",
        "VUELING AIRLINES": "Vueling",
        "TRANSAVIA AIRLINES": "Transavia",
        "NORWEGIAN AIR SHUTTLE": "Norwegian",
        "NORWEGIAN AIR INTERNATIONAL": "Norwegian",
        "SWISS INTERNATIONAL AIR LINES": "Swiss",
        "AUSTRIAN AIRLINES": "Austrian",
        "AIR BALTIC": "airBaltic",
        "AER LINGUS": "Aer Lingus",
    }
)

# Ordered: the first matching prefix wins, so longer brands come before their stems.
BRAND_PREFIXES = (
    ("TUIFLY", "TUIfly"),
    ("TUI", "TUI"),
    ("EASYJET", "easyJet"),
    ("JET2", "Jet2"),
    ("AIRBALTIC", "airBaltic"),
    ("SMARTLYNX", "SmartLynx"),
    ("SUNEXPRESS", "SunExpress"),
    ("SKYUP", "SkyUp"),
    ("FLYONE", "FlyOne"),
)

# Short code-like tokens kept in capitals by the fallback casing.
UPPERCASE_TOKENS = frozenset(
    {"SAS", "KLM", "TAP", "TUI", "LOT", "DHL", "UPS", "TNT", "ASL", "UK", "USA", "II", "III"}
)
