from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    fetch_timeout: float = 10.0
    max_body_bytes: int = 2 * 1024 * 1024
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    )
    accept_language: str = "es-ES,es;q=0.9,en;q=0.8"
