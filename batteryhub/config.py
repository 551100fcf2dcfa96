import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.dev"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "BatteryHub"
    debug: bool = False
    log_level: str = "INFO"
    catalog_path: Path = Path("data/battery.json")
    uploads_dir: Path = Path("uploads")
    cors_origins: list[str] = ["https://batteryboss.vercel.app"]
    site_name: str = "BatteryHub"
    currency: str = "INR"
    default_page_size: int = 10
    host: str = "0.0.0.0"
    port: int = 5000

    model_config = {
        "env_prefix": "BATTERYHUB_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        # hosting platforms hand us a bare PORT
        port = os.environ.get("PORT") or _env_vars.get("PORT")
        if port and port.isdigit() and "port" not in self.model_fields_set:
            self.port = int(port)


settings = Settings()
