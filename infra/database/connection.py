from sqlmodel import create_engine, Session
from sqlalchemy.engine import Engine
from fastapi import Request
import os
import threading
from config import Settings, BASE_DIR
from utils.logger import get_logger

logger = get_logger(__name__)

db_lock = threading.RLock()


def init_engine(db_settings: Settings) -> Engine:
    """
    設定からエンジンを作成する。
    DuckDB の場合はファイルの親ディレクトリも作成します。
    """
    if db_settings.uses_duckdb:
        os.makedirs(os.path.dirname(os.path.abspath(db_settings.duckdb_path)), exist_ok=True)
    return create_engine(db_settings.database_url, echo=False)


def get_alembic_config():
    from alembic.config import Config

    alembic_cfg = Config(os.path.join(BASE_DIR, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(BASE_DIR, "alembic"))
    return alembic_cfg


def run_migrations(db_engine: Engine):
    """
    Alembic の前方マイグレーションを head まで適用する。
    DuckDBの接続競合を避けるため、エンジンのコネクションを Alembic と共有します。
    """
    from alembic import command

    alembic_cfg = get_alembic_config()
    with db_engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")


def init_db(db_engine: Engine):
    """
    アプリケーション起動時のDB初期化フロー。
    """
    with db_lock:
        try:
            logger.info(f"Running database migrations on {db_engine.url!r}...")
            run_migrations(db_engine)
            logger.info("Migrations completed successfully")
        except Exception as e:
            logger.error(f"Error during database initialization: {e}")
            raise


def close_db(db_engine: Engine):
    """
    データベース接続を終了する。
    main.py の lifespan イベントから呼び出されます。
    """
    db_engine.dispose()


def get_session(request: Request):
    # エンジンは create_app が app.state に載せたものを使う
    with Session(request.app.state.engine) as session:
        yield session
