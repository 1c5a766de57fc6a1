from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    allowed_origins: str = "http://localhost:3001"
    lower_is_better_biomarkers: str = "total_cholesterol,ldl_cholesterol,glucose,creatinine"


settings = Settings()
