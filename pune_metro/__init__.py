"""
Pune Metro Route Planner

노선도 모델, 최단 경로/요금 계산, 노선 변경 및 데이터 파일 저장
"""

__version__ = "1.2.0"
