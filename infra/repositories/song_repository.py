from typing import List, Optional, Tuple
from sqlmodel import Session, select, col
from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError

from domain.errors import StorageError
from domain.models.song import Song, SongFilter, utc_now
from utils.logger import get_logger

logger = get_logger(__name__)


class SongRepository:
    def __init__(self, session: Session):
        self.session = session

    def _fail(self, operation: str, error: SQLAlchemyError, **context) -> StorageError:
        self.session.rollback()
        details = ", ".join(f"{k}={v!r}" for k, v in context.items())
        logger.error(f"Song store {operation} failed ({details}): {error}")
        return StorageError(f"Failed to {operation} song")

    def create(self, song: Song) -> Song:
        try:
            self.session.add(song)
            self.session.commit()
            self.session.refresh(song)
        except SQLAlchemyError as e:
            raise self._fail("create", e, group=song.group, song=song.title) from e
        return song

    def get_by_id(self, song_id: int) -> Optional[Song]:
        try:
            return self.session.get(Song, song_id)
        except SQLAlchemyError as e:
            raise self._fail("get", e, id=song_id) from e

    def update(self, song: Song) -> Song:
        """全カラムを上書き保存する (部分更新はしない)"""
        song.updated_at = utc_now()
        try:
            self.session.add(song)
            self.session.commit()
            self.session.refresh(song)
        except SQLAlchemyError as e:
            raise self._fail("update", e, id=song.id) from e
        return song

    def delete(self, song_id: int) -> None:
        # 存在確認はしない (存在しないIDの削除も成功扱い)
        try:
            self.session.execute(delete(Song).where(col(Song.id) == song_id))
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e, id=song_id) from e

    def _apply_filters(self, query, filters: SongFilter):
        if filters.group:
            query = query.where(col(Song.group).ilike(f"%{filters.group}%"))
        if filters.song:
            query = query.where(col(Song.title).ilike(f"%{filters.song}%"))
        return query

    def list(self, page: int, size: int, filters: SongFilter) -> Tuple[List[Song], int]:
        """フィルタ適用後の件数 (ページング前) とページ分のレコードを返す"""
        count_query = self._apply_filters(select(func.count()).select_from(Song), filters)
        query = self._apply_filters(select(Song), filters)
        query = query.order_by(col(Song.id)).offset((page - 1) * size).limit(size)

        try:
            total = self.session.exec(count_query).one()
            songs = self.session.exec(query).all()
        except SQLAlchemyError as e:
            raise self._fail("list", e, page=page, size=size, filters=filters) from e

        return list(songs), total
