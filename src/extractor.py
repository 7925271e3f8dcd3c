"""Structural extraction of AENA result rows.

Both AENA listing pages render one `<article class="fila resultado ...">` per row:

* destinations page: title = destination "CITY (IATA)", an optional
  `<span class="titulo">País</span><span class="resultado">COUNTRY</span>` pair,
  and one `<span class="nombre">` per airline serving it;
* airlines page: title = airline name, one `<span class="nombre">` per destination.

Rows without a title are not destinations (headers, ads) and are skipped silently.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from src.iata import split_iata
from src.models import RawAirlineRecord, RawDestinationLink, RawRouteRecord

logger = logging.getLogger(__name__)

ROW_SELECTOR = "article.fila.resultado"
TITLE_SELECTOR = "span.title.bold"
NAME_SELECTOR = "span.nombre"
COUNTRY_HEADING = re.compile(r"^pa[ií]s$", re.IGNORECASE)


def _clean_text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return " ".join(node.get_text(" ", strip=True).split())


def _row_title(row: Tag) -> Optional[str]:
    title = _clean_text(row.select_one(TITLE_SELECTOR))
    return title or None


def _row_country(row: Tag) -> Optional[str]:
    for heading in row.select("span.titulo"):
        if not COUNTRY_HEADING.match(_clean_text(heading)):
            continue
        value = heading.find_next_sibling("span", class_="resultado")
        country = _clean_text(value)
        return country or None
    return None


def _row_names(row: Tag) -> List[str]:
    names = (_clean_text(node) for node in row.select(NAME_SELECTOR))
    return [name for name in names if name]


class _RowExtractor:
    """Lazy, restartable iteration over the result rows of one markup document."""

    def __init__(self, markup: str):
        self.markup = markup or ""
        self._rows: Optional[List[Tag]] = None

    def _result_rows(self) -> List[Tag]:
        if self._rows is None:
            soup = BeautifulSoup(self.markup, "html.parser")
            self._rows = soup.select(ROW_SELECTOR)
            logger.debug("Found %d result rows", len(self._rows))
        return self._rows

    def __iter__(self) -> Iterator[Union[RawRouteRecord, RawAirlineRecord]]:
        for row in self._result_rows():
            record = self._build(row)
            if record is not None:
                yield record

    def _build(self, row: Tag):
        raise NotImplementedError


class RecordExtractor(_RowExtractor):
    """Destinations page -> RawRouteRecord per destination row."""

    def _build(self, row: Tag) -> Optional[RawRouteRecord]:
        title = _row_title(row)
        if title is None:
            return None
        return RawRouteRecord(
            raw_label=title,
            iata=split_iata(title).iata,
            country=_row_country(row),
            raw_airline_labels=tuple(_row_names(row)),
        )


class AirlineRecordExtractor(_RowExtractor):
    """Airlines page -> RawAirlineRecord per airline row."""

    def _build(self, row: Tag) -> Optional[RawAirlineRecord]:
        name = _row_title(row)
        if name is None:
            return None
        links = []
        for raw in _row_names(row):
            city, iata = split_iata(raw)
            links.append(RawDestinationLink(city=city, iata=iata, raw=raw))
        return RawAirlineRecord(name=name, destinations=tuple(links))


def extract_route_records(markup: str) -> RecordExtractor:
    return RecordExtractor(markup)


def extract_airline_records(markup: str) -> AirlineRecordExtractor:
    return AirlineRecordExtractor(markup)
