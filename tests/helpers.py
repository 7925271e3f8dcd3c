from src.config import Settings
from src.fetch import FetchError


def result_row(title=None, names=(), country=None, country_heading="País"):
    """Render one AENA `article.fila.resultado` block."""
    parts = ['<article class="fila resultado par">']
    if title is not None:
        parts.append(f'<div class="cabecera"><span class="title bold">{title}</span></div>')
    if country is not None:
        parts.append(
            f'<div class="dato"><span class="titulo">{country_heading}</span>\n'
            f'  <span class="resultado">{country}</span></div>'
        )
    parts.append('<ul class="listado">')
    for name in names:
        parts.append(f'<li><span class="nombre">{name}</span></li>')
    parts.append("</ul></article>")
    return "\n".join(parts)


def listing_page(*rows):
    return (
        "<html><head><title>Aena</title></head><body>"
        '<section class="resultados">' + "\n".join(rows) + "</section></body></html>"
    )


DESTINATIONS_HTML = listing_page(
    result_row(
        "BARCELONA-EL PRAT JOSEP TARRADELLAS (BCN)",
        names=("VUELING AIRLINES SA", "RYANAIR (RYR)", "RYANAIR DAC"),
        country="España",
    ),
    result_row("LONDRES /LONDON CITY APT. (LCY)", names=("BRITISH AIRWAYS PLC",), country="Reino Unido"),
    result_row(
        "DUSSELDORF (DUS)",
        names=("EUROWINGS GMBH", "TUIFLY GMBH, LANGENHAGEN", "CONDOR FLUGDIENST GMBH"),
        country="Alemania",
    ),
    result_row(None, names=("NOT A DESTINATION",)),
    result_row(
        "ESTOCOLMO-ARLANDA (ARN)",
        names=("SCANDINAVIAN AIRLINES SYSTEM", "NORWEGIAN AIR SHUTTLE AS"),
        country="Suecia",
    ),
)

AIRLINES_HTML = listing_page(
    result_row("RYANAIR (RYR)", names=("BARCELONA-EL PRAT JOSEP TARRADELLAS (BCN)", "DUSSELDORF (DUS)")),
    result_row("BRITISH AIRWAYS PLC", names=("LONDRES /LONDON CITY APT. (LCY)",)),
    result_row(None, names=("IGNORED (XXX)",)),
)


def fake_fetcher(pages):
    """Fetcher serving `pages[url]`; an exception value is raised instead of returned."""
    calls = []

    def fetch(url, **kwargs):
        calls.append((url, kwargs))
        result = pages[url]
        if isinstance(result, Exception):
            raise result
        return result

    fetch.calls = calls
    return fetch


def sample_pages(settings=None, destinations=DESTINATIONS_HTML, airlines=AIRLINES_HTML):
    settings = settings or Settings()
    return {settings.destinations_url: destinations, settings.airlines_url: airlines}


def failing_pages(settings=None, status=503):
    settings = settings or Settings()
    error = FetchError(f"fetch failed: {status}")
    return {settings.destinations_url: error, settings.airlines_url: error}
