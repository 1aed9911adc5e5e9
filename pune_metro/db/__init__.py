"""
노선 카탈로그 및 데이터 파일 세팅
"""

from pune_metro.db.catalog import LineCatalog, normalize_line_name
from pune_metro.db.defaults import default_catalog
from pune_metro.db.record_store import RecordStore, dumps, loads

__all__ = [
    "LineCatalog",
    "normalize_line_name",
    "default_catalog",
    "RecordStore",
    "dumps",
    "loads",
]
