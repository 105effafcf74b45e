"""
포스트 데이터 조립 테스트 모듈
"""

import datetime
import unittest
from pathlib import Path
import sys

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from lottobot.src.models import DrawResult, PredictionSet
from lottobot.src.report.report_builder import (
    CATEGORY,
    DrawReportSchema,
    PredictionReportSchema,
    ball_color,
    build_draw_report,
    build_prediction_report,
    format_money,
    prediction_color,
)


class TestReportHelpers(unittest.TestCase):
    def test_ball_color(self):
        """번호 구간별 공 색상"""
        cases = {
            1: '#fbc400', 10: '#fbc400',
            11: '#69c8f2', 20: '#69c8f2',
            21: '#ff7272', 30: '#ff7272',
            31: '#aaa', 40: '#aaa',
            41: '#b0d840', 45: '#b0d840',
        }
        for number, color in cases.items():
            self.assertEqual(ball_color(number), color, number)

    def test_format_money(self):
        self.assertEqual(format_money(0), '0')
        self.assertEqual(format_money(1234567), '1,234,567')
        self.assertEqual(format_money(2345678901), '2,345,678,901')

    def test_prediction_color_cycles(self):
        self.assertEqual(prediction_color(0), '#667eea')
        self.assertEqual(prediction_color(4), '#fa709a')
        self.assertEqual(prediction_color(5), prediction_color(0))


class TestDrawReport(unittest.TestCase):
    """당첨 결과 포스트 데이터 테스트"""

    def setUp(self):
        self.draw = DrawResult(
            draw_no=1205,
            draw_date='2026-01-03',
            numbers=(1, 4, 16, 23, 31, 41),
            bonus=2,
            first_prize=1500000000,
            first_winners=15,
        )

    def test_build(self):
        report = build_draw_report(self.draw)

        self.assertEqual(report.title, '🎰 1205회 로또 당첨번호 [2026-01-03]')
        self.assertEqual([b.number for b in report.balls], [1, 4, 16, 23, 31, 41])
        self.assertEqual(
            [b.color for b in report.balls],
            ['#fbc400', '#fbc400', '#69c8f2', '#ff7272', '#aaa', '#b0d840'],
        )
        self.assertEqual(report.bonus_ball.number, 2)
        self.assertEqual(report.bonus_ball.color, '#fbc400')
        self.assertEqual(report.first_prize_text, '1,500,000,000원')
        self.assertEqual(report.first_winners, 15)
        self.assertEqual(report.category, CATEGORY)
        self.assertIn('1205회로또', report.tags)

    def test_schema_dump(self):
        data = DrawReportSchema().dump(build_draw_report(self.draw))

        self.assertEqual(data['draw_no'], 1205)
        self.assertEqual(data['bonus_ball'], {'number': 2, 'color': '#fbc400'})
        self.assertEqual(len(data['balls']), 6)
        self.assertEqual(data['category'], '로또/복권')


class TestPredictionReport(unittest.TestCase):
    """예측 번호 포스트 데이터 테스트"""

    def setUp(self):
        self.predictions = [
            PredictionSet.create('random', '🎲 완전 랜덤', [45, 3, 12, 27, 8, 33], '1~45 중 무작위 6개'),
            PredictionSet.create('hot', '🔥 핫넘버 조합', [7, 12, 33, 1, 18, 40], '최근 자주 나온 번호 중심'),
        ]
        self.today = datetime.date(2026, 10, 19)

    def test_build(self):
        report = build_prediction_report(
            1247, self.predictions, [7, 12], [45, 44], today=self.today, window=20,
        )

        self.assertEqual(report.next_round, 1247)
        self.assertEqual(report.analysis_date, '2026년 10월 19일')
        self.assertEqual(report.title, '🔮 1247회 로또 예측번호 [10/19] AI 분석 추천')
        self.assertEqual(report.window, 20)
        self.assertEqual(report.hot_numbers, [7, 12])
        self.assertEqual(report.cold_numbers, [45, 44])
        self.assertIn('1247회로또예측', report.tags)

        self.assertEqual([c.key for c in report.predictions], ['random', 'hot'])
        self.assertEqual([c.accent_color for c in report.predictions], ['#667eea', '#f093fb'])
        self.assertEqual([b.number for b in report.predictions[0].balls], [3, 8, 12, 27, 33, 45])

    def test_schema_dump(self):
        report = build_prediction_report(1247, self.predictions, [7], [45], today=self.today)
        data = PredictionReportSchema().dump(report)

        self.assertEqual(data['next_round'], 1247)
        self.assertEqual(data['predictions'][1]['name'], '🔥 핫넘버 조합')
        self.assertEqual(data['predictions'][1]['balls'][0], {'number': 1, 'color': '#fbc400'})
        self.assertEqual(data['window'], 20)


if __name__ == '__main__':
    unittest.main()
