from fastapi import APIRouter, Depends, Response
from sqlmodel import Session
from typing import Optional
from infra.database.connection import get_session
from api.dependencies import get_music_info_client, parse_song_id, parse_positive_int
from api.schemas.song import SongRequest, SongRead, PaginatedSongs, LyricsPage, ErrorResponse
from app.services.song_app_service import SongAppService
from domain.constants import DEFAULT_PAGE, DEFAULT_SONGS_PAGE_SIZE, DEFAULT_VERSES_PAGE_SIZE
from domain.models.song import SongFilter
from utils.external_metadata import MusicInfoClient

router = APIRouter(prefix="/api/v1/songs", tags=["songs"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("", response_model=SongRead, status_code=201, responses=ERROR_RESPONSES)
async def create_song(
    req: SongRequest,
    session: Session = Depends(get_session),
    client: MusicInfoClient = Depends(get_music_info_client)
):
    """外部APIでエンリッチした楽曲を登録する"""
    service = SongAppService(session, client)
    song = await service.create_song(req.group, req.song)
    return SongRead.from_model(song)


@router.get("", response_model=PaginatedSongs, responses=ERROR_RESPONSES)
def list_songs(
    page: Optional[str] = None,
    size: Optional[str] = None,
    group: Optional[str] = None,
    song: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """楽曲一覧 (group / song の部分一致フィルタ + ページング)"""
    page_num = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(size, DEFAULT_SONGS_PAGE_SIZE)

    service = SongAppService(session)
    result = service.list_songs(page_num, page_size, SongFilter.build(group=group, song=song))
    return PaginatedSongs(
        total=result.total,
        page=result.page,
        size=result.size,
        data=[SongRead.from_model(s) for s in result.songs],
    )


@router.get("/{song_id}/lyrics", response_model=LyricsPage, responses=ERROR_RESPONSES)
def get_lyrics(
    song_id: str,
    page: Optional[str] = None,
    size: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """歌詞を節 (verse) 単位でページングして返す"""
    song_id_num = parse_song_id(song_id)
    page_num = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(size, DEFAULT_VERSES_PAGE_SIZE)

    service = SongAppService(session)
    result = service.get_lyrics(song_id_num, page_num, page_size)
    return LyricsPage(total=result.total, page=result.page, size=result.size, verses=result.verses)


@router.put("/{song_id}", response_model=SongRead, responses=ERROR_RESPONSES)
async def update_song(
    song_id: str,
    req: SongRequest,
    session: Session = Depends(get_session),
    client: MusicInfoClient = Depends(get_music_info_client)
):
    song_id_num = parse_song_id(song_id)
    service = SongAppService(session, client)
    song = await service.update_song(song_id_num, req.group, req.song)
    return SongRead.from_model(song)


@router.delete("/{song_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_song(song_id: str, session: Session = Depends(get_session)):
    song_id_num = parse_song_id(song_id)
    service = SongAppService(session)
    service.delete_song(song_id_num)
    return Response(status_code=204)
