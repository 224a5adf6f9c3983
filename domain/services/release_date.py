import re
from datetime import date, datetime

from domain.constants import RELEASE_DATE_FORMAT
from domain.errors import FormatError

# 日・月は2桁固定 (strptime 単体では "1.7.2006" も通ってしまう)
RELEASE_DATE_PATTERN = re.compile(r"\d{2}\.\d{2}\.\d{4}", re.ASCII)


def parse_release_date(value: str) -> date:
    """外部APIの DD.MM.YYYY 形式のリリース日を date に変換する"""
    if not isinstance(value, str) or not RELEASE_DATE_PATTERN.fullmatch(value):
        raise FormatError(f"Invalid release date format: {value!r}")
    try:
        return datetime.strptime(value, RELEASE_DATE_FORMAT).date()
    except ValueError as e:
        raise FormatError(f"Invalid release date format: {value!r}") from e
