"""
노선 데이터 파일 (텍스트 레코드 포맷) 읽기/쓰기

노선 하나 당 블록 하나:

    <lineName> Line
    <역 이름, 쉼표 구분>
    <거리 가중치>
    <요금 행렬 0행, 쉼표 구분>
    ...
    <요금 행렬 n-1행>
    <빈 줄>

파일이 손상된 경우 일부만 읽은 상태를 쓰지 않고 기본 노선도로 대체한다.
"""

import os
import logging
import tempfile
from pathlib import Path
from typing import List, Union

from pune_metro.core.exceptions import CatalogLoadException, PersistenceException
from pune_metro.db.catalog import LineCatalog, normalize_line_name
from pune_metro.db.defaults import default_catalog
from pune_metro.models.domain import Line

logger = logging.getLogger(__name__)

HEADER_SUFFIX = " Line"


def dumps(catalog: LineCatalog) -> str:
    """카탈로그 => 레코드 텍스트"""
    chunks = []
    for name, stations, distance, fares in catalog.records():
        chunks.append(f"{name}{HEADER_SUFFIX}\n")
        chunks.append(",".join(stations) + "\n")
        chunks.append(f"{distance}\n")
        for row in fares:
            chunks.append(",".join(str(value) for value in row) + "\n")
        chunks.append("\n")
    return "".join(chunks)


def loads(text: str) -> LineCatalog:
    """
    레코드 텍스트 => 카탈로그

    Raises:
        CatalogLoadException: 헤더/역/거리/요금 행 형식 오류, 행렬 크기 불일치,
            대칭·대각선 조건 위반, 노선 이름 중복, 노선 0개
    """
    lines = text.splitlines()
    catalog = LineCatalog()
    pos = 0

    def next_line(what: str, line_name: str) -> str:
        nonlocal pos
        if pos >= len(lines):
            raise CatalogLoadException(f"{line_name}: {what} 누락 (파일 끝)")
        value = lines[pos]
        pos += 1
        return value

    while pos < len(lines):
        header = lines[pos].strip()
        pos += 1
        if not header:
            continue
        if not header.endswith(HEADER_SUFFIX):
            raise CatalogLoadException(f"{pos}행: 노선 헤더가 아닙니다: {header!r}")

        line_name = normalize_line_name(header[: -len(HEADER_SUFFIX)])
        if not line_name:
            raise CatalogLoadException(f"{pos}행: 노선 이름이 비어있습니다")
        if catalog.has_line(line_name):
            raise CatalogLoadException(f"노선 이름 중복: {line_name}")

        stations = [s.strip() for s in next_line("역 목록", line_name).split(",")]
        if any(not s for s in stations):
            raise CatalogLoadException(f"{line_name}: 빈 역 이름이 있습니다")

        distance = _parse_int(next_line("거리 가중치", line_name), line_name)

        n = len(stations)
        fares: List[List[int]] = []
        for i in range(n):
            cells = next_line(f"요금 {i}행", line_name).split(",")
            if len(cells) != n:
                raise CatalogLoadException(
                    f"{line_name}: 요금 {i}행의 열 수({len(cells)})가 역 수({n})와 다릅니다"
                )
            fares.append([_parse_int(cell, line_name) for cell in cells])

        line = Line(name=line_name, stations=stations, distance=distance, fares=fares)
        errors = line.validation_errors()
        if errors:
            raise CatalogLoadException("; ".join(errors))

        catalog.put_line(line)

    if len(catalog) == 0:
        raise CatalogLoadException("노선 데이터가 없습니다")

    return catalog


def _parse_int(value: str, line_name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise CatalogLoadException(f"{line_name}: 정수가 아닌 값: {value!r}")


class RecordStore:
    """노선 데이터 파일 읽기/쓰기"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> LineCatalog:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadException(f"데이터 파일 읽기 실패: {self.path} ({e})")

        catalog = loads(text)
        logger.info(f"✓ 노선 데이터 로드 완료: {self.path}, {len(catalog)}개 노선")
        return catalog

    def load_or_default(self) -> LineCatalog:
        """파일이 없거나 손상된 경우 기본 노선도 반환"""
        if not self.exists():
            logger.info(f"데이터 파일 없음, 기본 노선도로 초기화: {self.path}")
            return default_catalog()

        try:
            return self.load()
        except CatalogLoadException as e:
            logger.warning(f"데이터 파일 손상, 기본 노선도로 초기화: {e.message}")
            return default_catalog()

    def save(self, catalog: LineCatalog) -> None:
        """
        전체 카탈로그를 다시 씀 (임시 파일 -> replace)

        Raises:
            PersistenceException: 파일 쓰기 실패
        """
        text = dumps(catalog)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            logger.error(f"노선 데이터 저장 실패: {self.path} ({e})")
            raise PersistenceException(f"노선 데이터 저장 실패: {e}")
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.info(f"노선 데이터 저장 완료: {self.path}")
