"""
당첨 기록 저장소 모듈
"""

from .api_store import LottoApiStore
from .base import DrawRecordStore, InMemoryDrawStore
from .csv_store import CsvDrawStore

__all__ = ['CsvDrawStore', 'DrawRecordStore', 'InMemoryDrawStore', 'LottoApiStore']
