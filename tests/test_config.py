from __future__ import annotations

from mdpreview.config import Settings


def test_defaults_when_env_is_empty():
    settings = Settings.from_env({})
    assert settings.log_level == "INFO"
    assert settings.renderer_url is None
    assert settings.render_format == "svg"
    assert settings.api_port == 8000
    assert settings.debounce_ms == 300


def test_env_overrides_and_bad_values_fall_back():
    settings = Settings.from_env(
        {
            "MDPREVIEW_LOG_LEVEL": "debug",
            "MDPREVIEW_RENDERER_URL": "https://kroki.example",
            "MDPREVIEW_REQUEST_TIMEOUT_S": "not-a-number",
            "MDPREVIEW_API_PORT": "9001",
            "MDPREVIEW_API_RELOAD": "yes",
            "MDPREVIEW_DEBOUNCE_MS": "",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.renderer_url == "https://kroki.example"
    assert settings.request_timeout_s == 30.0
    assert settings.api_port == 9001
    assert settings.api_reload is True
    assert settings.debounce_ms == 300
