"""i18n marker facade configuration settings."""

from babel.core import parse_locale
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translation facade configuration settings.

    Environment Variables:
        I18N_FALLBACK_LANGUAGE: Language returned when locale detection fails
            (default: "en")
        I18N_LOCALE_CATEGORY: Locale category consulted first by the
            environment detector (default: "LC_MESSAGES")
        I18N_LOCALE_OVERRIDE: Fixed locale tag used instead of environment
            detection (e.g. "fr-CA"). Empty disables the override.
    """

    fallback_language: str = Field(
        default="en",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Base language returned when locale detection fails",
    )
    locale_category: str = Field(
        default="LC_MESSAGES",
        alias="I18N_LOCALE_CATEGORY",
        description="Locale category environment variable checked first",
    )
    locale_override: str = Field(
        default="",
        alias="I18N_LOCALE_OVERRIDE",
        description="Fixed locale tag replacing environment detection",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("fallback_language", mode="before")
    @classmethod
    def _normalize_fallback_language(cls, v):
        """Keep only the base language subtag (e.g., "pt" from "pt_BR").

        Raises:
            ValueError: If the value is not a well-formed locale identifier.
        """
        if not isinstance(v, str) or not v.strip():
            return "en"
        identifier = v.strip().split(".")[0].split("@")[0]
        sep = "-" if "-" in identifier else "_"
        try:
            return parse_locale(identifier, sep=sep)[0]
        except ValueError as e:
            raise ValueError(f"Invalid I18N_FALLBACK_LANGUAGE: {v}") from e


class Settings(BaseSettings):
    """Application-level settings aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
