from social.graze.avatar.app.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "MASTODON_HOSTNAME", "METRICS_BACKEND", "GRAVATAR_SIZE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.http_port == 3000
    assert settings.github_api_hostname == "api.github.com"
    assert settings.mastodon_hostname == "mastodon.social"
    assert settings.gravatar_hostname == "gravatar.com"
    assert settings.gravatar_size == 400
    assert settings.metrics_backend == "none"
    assert settings.sentry_dsn is None


def test_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MASTODON_HOSTNAME", "hachyderm.io")
    monkeypatch.setenv("METRICS_BACKEND", "telegraf")
    monkeypatch.setenv("TELEGRAF_HOST", "statsd.internal")

    settings = Settings()

    assert settings.http_port == 8080
    assert settings.mastodon_hostname == "hachyderm.io"
    assert settings.metrics_backend == "telegraf"
    assert settings.statsd_host == "statsd.internal"
