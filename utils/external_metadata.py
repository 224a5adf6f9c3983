import asyncio
import json
from typing import Optional

import aiohttp
import pydantic
from pydantic import BaseModel, ConfigDict, Field

from domain.errors import UpstreamError
from utils.logger import get_logger

logger = get_logger(__name__)

INFO_PATH = "/info"


class SongDetail(BaseModel):
    """外部メタデータAPI /info のレスポンス"""
    model_config = ConfigDict(populate_by_name=True)

    release_date: str = Field(alias="releaseDate")
    text: str
    link: str


class MusicInfoClient:
    """
    外部メタデータAPIのクライアント。
    リトライ・キャッシュは行わず、失敗はすべて UpstreamError として扱う。
    """

    def __init__(self, base_url: str, timeout: Optional[aiohttp.ClientTimeout] = None):
        self.base_url = base_url.rstrip("/")
        # None の場合は aiohttp のデフォルト
        self.timeout = timeout

    @property
    def info_url(self) -> str:
        return f"{self.base_url}{INFO_PATH}"

    async def fetch(self, group: str, song: str) -> SongDetail:
        params = {"group": group, "song": song}
        logger.info(f"Requesting song info: {self.info_url} group={group!r} song={song!r}")

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(self.info_url, params=params) as response:
                    body = await response.read()
                    if response.status != 200:
                        logger.error(f"Music API returned status {response.status}, body: {body[:500]!r}")
                        raise UpstreamError(f"Music API returned status code: {response.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Music API request failed (group={group!r}, song={song!r}): {e!r}")
            raise UpstreamError(f"Failed to make request: {e}") from e

        return self._decode(body)

    def _decode(self, body: bytes) -> SongDetail:
        try:
            return SongDetail.model_validate(json.loads(body.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, pydantic.ValidationError) as e:
            logger.error(f"Failed to decode music API response: {e}")
            raise UpstreamError(f"Failed to decode response: {e}") from e
