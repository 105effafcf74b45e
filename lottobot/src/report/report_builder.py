"""
포스트 화면용 데이터 조립 모듈

HTML 렌더링은 하지 않고, 당첨 결과 포스트와 예측 번호 포스트에 들어갈 구조화된 데이터만 만듭니다.
"""

import datetime
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from marshmallow import Schema, fields

from ..models import DrawResult, PredictionSet

CATEGORY = '로또/복권'
PREDICTION_COLORS = ['#667eea', '#f093fb', '#4facfe', '#43e97b', '#fa709a']

def ball_color(number: int) -> str:
    """로또 공 색상 반환"""
    if number <= 10:
        return '#fbc400'  # 노랑
    if number <= 20:
        return '#69c8f2'  # 파랑
    if number <= 30:
        return '#ff7272'  # 빨강
    if number <= 40:
        return '#aaa'  # 회색
    return '#b0d840'  # 초록

def format_money(amount: int) -> str:
    """금액 포맷팅 (1234567 -> '1,234,567')"""
    return f"{amount:,}"

def prediction_color(index: int) -> str:
    return PREDICTION_COLORS[index % len(PREDICTION_COLORS)]

@dataclass
class Ball:
    number: int
    color: str

    @classmethod
    def of(cls, number: int) -> 'Ball':
        return cls(number=number, color=ball_color(number))

@dataclass
class DrawReport:
    """당첨 결과 포스트 데이터"""
    draw_no: int
    draw_date: str
    title: str
    balls: List[Ball]
    bonus_ball: Ball
    first_prize: int
    first_prize_text: str
    first_winners: int
    category: str = CATEGORY
    tags: List[str] = field(default_factory=list)

@dataclass
class PredictionCard:
    """예측 번호 한 세트의 화면 데이터"""
    key: str
    name: str
    method: str
    accent_color: str
    balls: List[Ball]

@dataclass
class PredictionReport:
    """예측 번호 포스트 데이터"""
    next_round: int
    analysis_date: str
    title: str
    predictions: List[PredictionCard]
    hot_numbers: List[int]
    cold_numbers: List[int]
    window: int
    category: str = CATEGORY
    tags: List[str] = field(default_factory=list)

def build_draw_report(draw: DrawResult) -> DrawReport:
    """
    당첨 결과 포스트 데이터 조립

    Args:
        draw: 당첨 기록

    Returns:
        DrawReport
    """
    return DrawReport(
        draw_no=draw.draw_no,
        draw_date=draw.draw_date,
        title=f"🎰 {draw.draw_no}회 로또 당첨번호 [{draw.draw_date}]",
        balls=[Ball.of(n) for n in draw.numbers],
        bonus_ball=Ball.of(draw.bonus),
        first_prize=draw.first_prize,
        first_prize_text=f"{format_money(draw.first_prize)}원",
        first_winners=draw.first_winners,
        tags=['로또', '로또당첨번호', f'{draw.draw_no}회로또', '복권', '당첨번호'],
    )

def build_prediction_report(
    next_round: int,
    predictions: Sequence[PredictionSet],
    hot_numbers: Sequence[int],
    cold_numbers: Sequence[int],
    today: Optional[datetime.date] = None,
    window: int = 20,
) -> PredictionReport:
    """
    예측 번호 포스트 데이터 조립

    Args:
        next_round: 예측 대상 회차
        predictions: 예측 번호 세트 목록
        hot_numbers: 핫넘버
        cold_numbers: 콜드넘버
        today: 분석일 (없으면 오늘)
        window: 분석에 사용한 회차 수

    Returns:
        PredictionReport
    """
    today = today or datetime.date.today()
    cards = [
        PredictionCard(
            key=p.key,
            name=p.name,
            method=p.method,
            accent_color=prediction_color(i),
            balls=[Ball.of(n) for n in p.numbers],
        )
        for i, p in enumerate(predictions)
    ]
    return PredictionReport(
        next_round=next_round,
        analysis_date=today.strftime('%Y년 %m월 %d일'),
        title=f"🔮 {next_round}회 로또 예측번호 [{today.strftime('%m/%d')}] AI 분석 추천",
        predictions=cards,
        hot_numbers=list(hot_numbers),
        cold_numbers=list(cold_numbers),
        window=window,
        tags=['로또예측', '로또번호추천', f'{next_round}회로또예측', '로또분석', '행운의번호'],
    )

# ============================================================
# 직렬화 스키마
# ============================================================
class BallSchema(Schema):
    number = fields.Int()
    color = fields.Str()

class DrawReportSchema(Schema):
    draw_no = fields.Int()
    draw_date = fields.Str()
    title = fields.Str()
    balls = fields.List(fields.Nested(BallSchema))
    bonus_ball = fields.Nested(BallSchema)
    first_prize = fields.Int()
    first_prize_text = fields.Str()
    first_winners = fields.Int()
    category = fields.Str()
    tags = fields.List(fields.Str())

class PredictionCardSchema(Schema):
    key = fields.Str()
    name = fields.Str()
    method = fields.Str()
    accent_color = fields.Str()
    balls = fields.List(fields.Nested(BallSchema))

class PredictionReportSchema(Schema):
    next_round = fields.Int()
    analysis_date = fields.Str()
    title = fields.Str()
    predictions = fields.List(fields.Nested(PredictionCardSchema))
    hot_numbers = fields.List(fields.Int())
    cold_numbers = fields.List(fields.Int())
    window = fields.Int()
    category = fields.Str()
    tags = fields.List(fields.Str())
