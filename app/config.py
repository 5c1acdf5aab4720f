from pathlib import Path

from pydantic_settings import BaseSettings

BUNDLED_RESOURCES_DIR = Path(__file__).parent / "resources"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    resources_dir: Path = BUNDLED_RESOURCES_DIR
    config_resource: str = "Config"
    viewport_width: float = 390.0
    log_level: str = "INFO"
