from pathlib import Path

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_FILE)

BUNDLED_MANIFEST = Path(__file__).resolve().parents[1] / "manifest.json"


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # App manifest (empty = the one shipped inside the package)
    APP_MANIFEST_PATH: str = ""

    @property
    def app_manifest_path(self) -> Path:
        configured = (self.APP_MANIFEST_PATH or "").strip()
        if not configured:
            return BUNDLED_MANIFEST

        path = Path(configured).expanduser()
        if not path.is_file():
            raise ValueError(
                f"APP_MANIFEST_PATH points to '{configured}', which is not a file. "
                "Fix the path or leave it empty to use the bundled manifest."
            )
        return path

    class Config:
        env_file = str(ENV_FILE)
        extra = "ignore"


settings = Settings()
