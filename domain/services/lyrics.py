from typing import List, Tuple

from domain.constants import VERSE_SEPARATOR


def split_verses(text: str) -> List[str]:
    """歌詞テキストを空行区切りで節 (verse) のリストに分割する"""
    return text.split(VERSE_SEPARATOR)


def paginate_verses(verses: List[str], page: int, size: int) -> Tuple[List[str], int]:
    """
    節のリストをページ分割する。
    total はページサイズではなく全節数を返す。
    """
    total = len(verses)
    start = (page - 1) * size
    end = start + size

    if start >= total:
        return [], total
    if end > total:
        end = total

    return verses[start:end], total
