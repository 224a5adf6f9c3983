from typing import Optional

from fastapi import Request

from domain.constants import MAX_SONG_ID
from domain.errors import ValidationError
from utils.external_metadata import MusicInfoClient


def get_music_info_client(request: Request) -> MusicInfoClient:
    return request.app.state.music_info_client


def parse_song_id(raw: str) -> int:
    """パスパラメータのIDを非負整数として解釈する"""
    if not (raw.isascii() and raw.isdigit()):
        raise ValidationError("Invalid ID format")
    song_id = int(raw)
    if song_id > MAX_SONG_ID:
        raise ValidationError("Invalid ID format")
    return song_id


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    page / size クエリの解釈。
    解釈できない値や 1 未満の値はデフォルト値にフォールバックする。
    """
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 1 else default
