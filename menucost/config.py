from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MENUCOST_", env_file=".env", extra="ignore")

    session_secret: str = "menucost-dev-secret"  # 🔐 Override in production
    sql_echo: bool = False
    log_level: str = "INFO"
    cache_ttl_seconds: int = 300
    cost_scale: int = 4  # decimal places kept on frozen line-item costs
    apply_default_kits: bool = True
    weekdays_only: bool = True


settings = Settings()
