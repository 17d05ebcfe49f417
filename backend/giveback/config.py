from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / "Giveback"
    # Applies to request and event response descriptions.
    max_description_chars: int = 300
    cors_origins: list[str] = [
        "http://127.0.0.1:8080",
        "http://localhost:8080",
    ]
    log_level: str = "INFO"
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def db_path(self) -> Path:
        return self.data_dir / "db.sqlite"

    model_config = {"env_prefix": "GIVEBACK_"}


settings = Settings()
