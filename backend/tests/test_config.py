"""Settings tests — environment parsing and normalisation.

Tests cover:
    - Defaults when the environment is silent
    - PROMPT_LOCALE selects the message and template locale
    - pdf_base_url loses trailing slashes
    - get_settings() caching
"""

import pytest
from pydantic import ValidationError

from firmbox.config import Settings, get_settings
from firmbox.core.domain_types import Locale


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PROMPT_LOCALE", "PDF_BASE_URL", "GENERATION_MODEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.prompt_locale == Locale.PL
    assert settings.pdf_base_url == "https://storage.googleapis.com/firmbox-pdfs"
    assert settings.generation_model == "claude-haiku-4-5"


def test_prompt_locale_en_from_env(clean_env):
    clean_env.setenv("PROMPT_LOCALE", "en")
    assert Settings(_env_file=None).prompt_locale == Locale.EN


def test_unknown_prompt_locale_rejected(clean_env):
    clean_env.setenv("PROMPT_LOCALE", "de")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_pdf_base_url_trailing_slash_stripped(clean_env):
    settings = Settings(_env_file=None, pdf_base_url="https://cdn.example.com/pdfs/")
    assert settings.pdf_base_url == "https://cdn.example.com/pdfs"


def test_pdf_base_url_from_env_stripped(clean_env):
    clean_env.setenv("PDF_BASE_URL", "https://cdn.example.com/pdfs//")
    assert Settings(_env_file=None).pdf_base_url == "https://cdn.example.com/pdfs"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
