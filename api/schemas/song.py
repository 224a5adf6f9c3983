from pydantic import BaseModel, Field
from typing import List
from datetime import date

from domain.models.song import Song


class SongRequest(BaseModel):
    group: str = Field(min_length=1)
    song: str = Field(min_length=1)


class SongRead(BaseModel):
    id: int
    group: str
    song: str
    release_date: date
    text: str
    link: str

    @classmethod
    def from_model(cls, song: Song) -> "SongRead":
        return cls(
            id=song.id,
            group=song.group,
            song=song.title,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
        )


class PaginatedSongs(BaseModel):
    total: int
    page: int
    size: int
    data: List[SongRead]


class LyricsPage(BaseModel):
    total: int
    page: int
    size: int
    verses: List[str]


class ErrorResponse(BaseModel):
    error: str
