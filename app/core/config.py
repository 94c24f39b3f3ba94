from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "GrammarCheckAPI"
    environment: str = "dev"
    log_level: str = "INFO"

    # Ein/Aus-Schalter des Checkers (früher: Toggle im Extension-Popup)
    grammar_checker_enabled: bool = True

    # Texte mit weniger (gestrippten) Zeichen werden gar nicht erst geprüft
    min_text_length: int = 3

    # "codepoint" = Python-Indizes, "utf16" = Offsets wie im Browser (JS)
    offset_unit: str = "codepoint"

    # Report: Kontext links/rechts eines Fundes und Länge der Textvorschau
    report_context_chars: int = 30
    report_preview_chars: int = 200


settings = Settings()
