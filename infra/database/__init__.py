# Database module
from .connection import init_engine, get_session, init_db, close_db, run_migrations
