from quizwizard.core.config import Settings


def test_cors_origins_split_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert Settings().cors_origins() == ["http://a.test", "http://b.test"]


def test_settings_normalisation():
    s = Settings(LOG_LEVEL="debug", API_URL="http://quiz.test/")
    assert s.LOG_LEVEL == "DEBUG"
    assert s.API_URL == "http://quiz.test"
    assert s.cors_origins() == ["*"]
    assert not hasattr(s, "DEBUG")
