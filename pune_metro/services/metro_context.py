# 카탈로그 + 서비스 묶음 팩토리

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pune_metro.core.config import settings
from pune_metro.db.catalog import LineCatalog
from pune_metro.db.record_store import RecordStore
from pune_metro.services.pathfinding_service import PathfindingService
from pune_metro.services.topology_service import TopologyService

logger = logging.getLogger(__name__)


@dataclass
class MetroContext:
    """
    프로세스가 소유하는 단일 노선도 상태

    두 서비스는 같은 LineCatalog 인스턴스를 공유한다.
    => 관리자 변경이 다음 경로 조회(MetroGraph 재생성)에 바로 반영됨
    """

    catalog: LineCatalog
    store: RecordStore
    pathfinding: PathfindingService
    topology: TopologyService


def create_context(
    data_file: Optional[Union[str, Path]] = None,
    catalog: Optional[LineCatalog] = None,
    interchange_station: Optional[str] = None,
) -> MetroContext:
    """
    데이터 파일에서 노선도를 읽어 context 생성

    - catalog가 주어지면 파일을 읽지 않고 그대로 사용
    - 파일이 없거나 손상된 경우 기본 노선도
    """
    store = RecordStore(data_file or settings.DATA_FILE)
    if catalog is None:
        catalog = store.load_or_default()

    interchange = interchange_station or settings.INTERCHANGE_STATION
    context = MetroContext(
        catalog=catalog,
        store=store,
        pathfinding=PathfindingService(catalog, interchange_station=interchange),
        topology=TopologyService(
            catalog, store, interchange_station=interchange, **settings.FARE_CONFIG
        ),
    )
    logger.info(
        f"✓ MetroContext 초기화 완료: 노선 {catalog.line_names()}, 환승역={interchange}"
    )
    return context
