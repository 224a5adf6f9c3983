from logging.config import fileConfig

from alembic import context
from alembic.ddl.impl import DefaultImpl
from sqlalchemy import create_engine, pool


class DuckDBImpl(DefaultImpl):
    # alembic に duckdb 方言を登録する
    __dialect__ = "duckdb"
    transactional_ddl = True


config = context.config

if config.config_file_name is not None:
    # アプリ側のロガーを無効化しない
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def run_migrations(connection) -> None:
    # リビジョンは生SQLなので target_metadata は不要
    context.configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


connection = config.attributes.get("connection", None)

if connection is not None:
    # 起動時・テスト時はアプリのエンジンのコネクションをそのまま使う
    run_migrations(connection)
else:
    # CLI (alembic upgrade head) から実行された場合
    from config import settings

    with create_engine(settings.database_url, poolclass=pool.NullPool).connect() as cli_connection:
        run_migrations(cli_connection)
