"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks INTCALC_.
Rdzeń (lexer, parser, evaluator) nie jest konfigurowalny; to tylko CLI i API.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # CLI
    prompt: str = "enter expression:"

    # App
    app_title: str = "IntCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="INTCALC_", env_file=".env", extra="ignore")
