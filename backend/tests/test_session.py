from catalog_api.db.session import build_engine, connect_args_for


def test_postgres_urls_get_libpq_keepalives():
    args = connect_args_for("postgresql+psycopg://u:p@db:5432/catalog")

    assert args["keepalives"] == 1
    assert args["connect_timeout"] == 10


def test_sqlite_urls_get_thread_option_only():
    assert connect_args_for("sqlite:///catalog.db") == {"check_same_thread": False}


def test_other_dialects_get_no_driver_options():
    assert connect_args_for("mysql+pymysql://u:p@db:3306/catalog") == {}
    assert connect_args_for("mssql+pyodbc://u:p@dsn") == {}


def test_build_engine_for_sqlite_connects():
    engine = build_engine("sqlite://")
    try:
        with engine.connect() as conn:
            assert conn.exec_driver_sql("SELECT 1").scalar() == 1
    finally:
        engine.dispose()
