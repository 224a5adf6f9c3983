from typing import Optional
from datetime import date, datetime, timezone
from dataclasses import dataclass
from sqlmodel import Field, SQLModel
from sqlalchemy import Column, Date, DateTime, String, Text


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Song(SQLModel, table=True):
    """
    楽曲モデル。外部メタデータAPIでエンリッチされた状態でのみ作成される。
    """
    __tablename__ = "songs"

    id: Optional[int] = Field(default=None, primary_key=True)

    group: str = Field(sa_column=Column("group_name", String, nullable=False))
    title: str = Field(sa_column=Column("song_name", String, nullable=False))

    # エンリッチ結果
    release_date: Optional[date] = Field(default=None, sa_column=Column("release_date", Date))
    text: str = Field(default="", sa_column=Column("text", Text))
    link: str = Field(default="", sa_column=Column("youtube_link", String))

    # タイムスタンプは UTC (timezone aware) で保持
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column("created_at", DateTime(timezone=True)))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column("updated_at", DateTime(timezone=True)))


@dataclass(frozen=True)
class SongFilter:
    """一覧検索の部分一致フィルタ (空文字は未指定扱い)"""
    group: Optional[str] = None
    song: Optional[str] = None

    @classmethod
    def build(cls, group: Optional[str] = None, song: Optional[str] = None) -> "SongFilter":
        return cls(group=group or None, song=song or None)
