"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks TRACE_COMP_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Ślad: format liczb w liniach [LOAD]/[MUL]/... ("g" jak domyślny iostream)
    trace_float_format: str = "g"

    # CLI: po błędzie pokaż częściową listę instrukcji
    show_partial_trace: bool = True

    # App
    app_title: str = "TraceComp"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="TRACE_COMP_", env_file=".env", extra="ignore")
