from catalog_api.core.config import DEFAULT_CORS_ORIGINS, DEFAULT_DATABASE_URL, Settings


def test_heroku_style_url_is_rewritten():
    settings = Settings(database_url="postgres://u:p@db:5432/catalog")

    assert settings.database_url == "postgresql+psycopg://u:p@db:5432/catalog"


def test_blank_database_url_falls_back_to_default():
    assert Settings(database_url="").database_url == DEFAULT_DATABASE_URL


def test_cors_origins_parsing(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " https://shop.example.com/ , http://localhost:3000,")

    assert Settings().cors_origins == ["https://shop.example.com", "http://localhost:3000"]


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    assert Settings(_env_file=None).cors_origins == DEFAULT_CORS_ORIGINS


def test_log_level_is_normalized():
    assert Settings(log_level=" debug ").log_level == "DEBUG"
