from dataclasses import dataclass
from typing import List, Optional
from sqlmodel import Session

from domain.errors import CatalogError, NotFoundError
from domain.models.song import Song, SongFilter
from domain.services.lyrics import split_verses, paginate_verses
from domain.services.release_date import parse_release_date
from infra.repositories.song_repository import SongRepository
from utils.external_metadata import MusicInfoClient
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SongPage:
    songs: List[Song]
    total: int
    page: int
    size: int


@dataclass
class VersePage:
    verses: List[str]
    total: int
    page: int
    size: int


class SongAppService:
    """
    楽曲カタログのユースケース。
    作成・更新は必ず外部メタデータAPIでエンリッチしてから保存する。
    """

    def __init__(self, session: Session, client: Optional[MusicInfoClient] = None):
        self.session = session
        self.client = client
        self.repository = SongRepository(session)

    async def _enrich(self, song: Song, group: str, title: str) -> Song:
        detail = await self.client.fetch(group, title)
        release_date = parse_release_date(detail.release_date)

        song.group = group
        song.title = title
        song.release_date = release_date
        song.text = detail.text
        song.link = detail.link
        return song

    def _get_or_raise(self, song_id: int) -> Song:
        song = self.repository.get_by_id(song_id)
        if not song:
            raise NotFoundError("Song not found")
        return song

    async def create_song(self, group: str, title: str) -> Song:
        logger.info(f"Getting song info for {group} - {title}")
        try:
            song = await self._enrich(Song(group=group, title=title), group, title)
            return self.repository.create(song)
        except CatalogError as e:
            logger.error(f"Create song failed (group={group!r}, song={title!r}): {e.message}")
            raise

    async def update_song(self, song_id: int, group: str, title: str) -> Song:
        song = self._get_or_raise(song_id)
        try:
            # group/song が変わらなくても毎回再取得する
            await self._enrich(song, group, title)
            return self.repository.update(song)
        except CatalogError as e:
            # エンリッチ途中の変更をセッションに残さない
            self.session.rollback()
            logger.error(f"Update song failed (id={song_id}, group={group!r}, song={title!r}): {e.message}")
            raise

    def delete_song(self, song_id: int) -> None:
        self.repository.delete(song_id)
        logger.info(f"Deleted song id={song_id}")

    def list_songs(self, page: int, size: int, filters: SongFilter) -> SongPage:
        songs, total = self.repository.list(page, size, filters)
        return SongPage(songs=songs, total=total, page=page, size=size)

    def get_lyrics(self, song_id: int, page: int, size: int) -> VersePage:
        song = self._get_or_raise(song_id)
        verses, total = paginate_verses(split_verses(song.text or ""), page, size)
        return VersePage(verses=verses, total=total, page=page, size=size)
