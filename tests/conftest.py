import os
import pytest
import sys
import uuid
from typing import Dict, Generator, List, Tuple, Union
from sqlmodel import Session, create_engine

# 1. パス解決: プロジェクトルートをsys.pathに追加
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.dirname(CURRENT_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import infra.database.connection as db_connection
from domain.errors import UpstreamError
from utils.external_metadata import SongDetail


class FakeMusicInfoClient:
    """
    外部メタデータAPIの代替。
    (group, song) ごとのレスポンス、または送出する例外を登録できる。
    """

    def __init__(self):
        self.responses: Dict[Tuple[str, str], Union[dict, Exception]] = {}
        self.default: Union[dict, Exception] = {
            "releaseDate": "01.01.2000",
            "text": "verse one\n\nverse two",
            "link": "https://example.com/default",
        }
        self.calls: List[Tuple[str, str]] = []

    def set_response(self, group: str, song: str, payload: Union[dict, Exception]):
        self.responses[(group, song)] = payload

    async def fetch(self, group: str, song: str) -> SongDetail:
        self.calls.append((group, song))
        payload = self.responses.get((group, song), self.default)
        if isinstance(payload, Exception):
            raise payload
        return SongDetail.model_validate(payload)


@pytest.fixture(name="engine")
def engine_fixture(tmp_path, mocker):
    """
    テストごとに独立したDuckDBファイルを作成し、Alembicマイグレーションを適用する。
    """
    test_db_path = os.path.join(str(tmp_path), f"song_catalog_test_{uuid.uuid4()}.duckdb")
    engine = create_engine(f"duckdb:///{test_db_path}")

    db_connection.run_migrations(engine)

    # アプリ起動時の init_db / close_db がテスト中に走らないようモック化
    mocker.patch("infra.database.connection.init_db")
    mocker.patch("infra.database.connection.close_db")

    yield engine

    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture(name="music_client")
def music_client_fixture() -> FakeMusicInfoClient:
    return FakeMusicInfoClient()


@pytest.fixture(name="client")
def client_fixture(session: Session, music_client: FakeMusicInfoClient) -> Generator:
    """FastAPIのTestClientを提供し、DBセッションと外部APIクライアントをDIで差し替える"""
    from fastapi.testclient import TestClient
    from main import app
    from infra.database.connection import get_session
    from api.dependencies import get_music_info_client

    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_music_info_client] = lambda: music_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def upstream_unavailable():
    return UpstreamError("Music API returned status code: 503")
