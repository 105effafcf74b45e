"""
동행복권 API 응답 스키마

구 API(common.do) 응답과 신 API(selectPstLt645Info.do) 응답을 모두 DrawResult로 변환합니다.
"""

from typing import Any, Dict, Optional

from marshmallow import EXCLUDE, Schema, fields, post_load, validate
from marshmallow import ValidationError as SchemaValidationError

from ..models import MAX_NUMBER, MIN_NUMBER, DrawResult
from ..utils.exceptions import ValidationError

_number = validate.Range(min=MIN_NUMBER, max=MAX_NUMBER)
_non_negative = validate.Range(min=0)

class DrawPayloadSchema(Schema):
    """구 API 응답 형식 ({"returnValue": "success", "drwNo": 1205, "drwtNo1": 1, ...})"""

    class Meta:
        unknown = EXCLUDE

    draw_no = fields.Int(data_key='drwNo', required=True, validate=validate.Range(min=1))
    draw_date = fields.Str(data_key='drwNoDate', load_default='')
    num1 = fields.Int(data_key='drwtNo1', required=True, validate=_number)
    num2 = fields.Int(data_key='drwtNo2', required=True, validate=_number)
    num3 = fields.Int(data_key='drwtNo3', required=True, validate=_number)
    num4 = fields.Int(data_key='drwtNo4', required=True, validate=_number)
    num5 = fields.Int(data_key='drwtNo5', required=True, validate=_number)
    num6 = fields.Int(data_key='drwtNo6', required=True, validate=_number)
    bonus = fields.Int(data_key='bnusNo', required=True, validate=_number)
    first_prize = fields.Int(data_key='firstWinamnt', load_default=0, validate=_non_negative)
    first_winners = fields.Int(data_key='firstPrzwnerCo', load_default=0, validate=_non_negative)

    @post_load
    def make_draw(self, data: Dict[str, Any], **kwargs) -> DrawResult:
        numbers = tuple(data.pop(f'num{i}') for i in range(1, 7))
        return DrawResult(numbers=numbers, **data)

def _format_date(date_str: str) -> str:
    """날짜 형식 변환: '20260103' -> '2026-01-03'"""
    if len(date_str) == 8 and date_str.isdigit():
        return f"{date_str[:4]}-{date_str[4:6]}-{date_str[6:8]}"
    return date_str

def convert_new_format(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    신 API 응답을 구 API 형식으로 변환

    신 API 형식: { "data": { "list": [{ "ltEpsd": 1205, "tm1WnNo": 1, ... }] } }

    Returns:
        구 API 형식 딕셔너리 (목록이 비어 있으면 None)
    """
    data_list = (payload.get('data') or {}).get('list') or []
    if not data_list:
        return None

    item = data_list[0]
    converted = {
        'returnValue': 'success',
        'drwNo': item.get('ltEpsd'),
        'drwNoDate': _format_date(str(item.get('ltRflYmd', ''))),
        'bnusNo': item.get('bnsWnNo'),
        'firstWinamnt': item.get('rnk1WnAmt', 0),
        'firstPrzwnerCo': item.get('rnk1WnNope', 0),
    }
    for i in range(1, 7):
        converted[f'drwtNo{i}'] = item.get(f'tm{i}WnNo')
    return converted

def is_drawn(payload: Optional[Dict[str, Any]]) -> bool:
    """추첨이 끝난 회차의 응답인지 확인"""
    if not payload:
        return False
    if payload.get('returnValue') == 'fail':
        return False
    return bool(payload.get('drwNo'))

def load_draw(payload: Dict[str, Any]) -> DrawResult:
    """
    구 API 형식 응답을 DrawResult로 변환

    Raises:
        ValidationError: 필드 누락, 번호 범위/중복 오류
    """
    try:
        return DrawPayloadSchema().load(payload)
    except SchemaValidationError as e:
        raise ValidationError(f"당첨 기록 형식 오류: {e.messages}") from e
