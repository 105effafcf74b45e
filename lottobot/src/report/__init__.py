"""
포스트 데이터 조립 모듈
"""

from .report_builder import (
    Ball,
    DrawReport,
    DrawReportSchema,
    PredictionCard,
    PredictionReport,
    PredictionReportSchema,
    ball_color,
    build_draw_report,
    build_prediction_report,
    format_money,
)

__all__ = [
    'Ball', 'DrawReport', 'DrawReportSchema', 'PredictionCard', 'PredictionReport',
    'PredictionReportSchema', 'ball_color', 'build_draw_report', 'build_prediction_report',
    'format_money',
]
