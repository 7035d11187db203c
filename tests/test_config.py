from asset_attributes.core.config import Settings

def test_cors_origins_from_comma_list(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]

def test_cors_origins_from_json_list(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://a.test", "http://b.test"]')
    assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]

def test_defaults(monkeypatch):
    monkeypatch.delenv("BACKEND_CORS_ORIGINS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.BACKEND_CORS_ORIGINS == ["*"]
    assert settings.API_V1_STR == "/api/v1"
    assert settings.DATABASE_URL == settings.SQLALCHEMY_DATABASE_URI
