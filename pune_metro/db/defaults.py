# 데이터 파일이 없거나 손상된 경우 사용하는 기본 노선도 (purple / aqua)

import logging

from pune_metro.algorithms.fare_matrix import banded_fare_matrix
from pune_metro.core.config import (
    DEFAULT_LINE_STATIONS,
    DEFAULT_LINE_DISTANCES,
    DEFAULT_FARE_BANDS,
)
from pune_metro.db.catalog import LineCatalog
from pune_metro.models.domain import Line

logger = logging.getLogger(__name__)


def default_catalog() -> LineCatalog:
    catalog = LineCatalog()
    for name, stations in DEFAULT_LINE_STATIONS.items():
        catalog.put_line(
            Line(
                name=name,
                stations=list(stations),
                distance=DEFAULT_LINE_DISTANCES[name],
                fares=banded_fare_matrix(len(stations), DEFAULT_FARE_BANDS[name]),
            )
        )
    logger.info(f"기본 노선도 생성: {catalog.line_names()}")
    return catalog
