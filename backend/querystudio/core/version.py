import json
import logging
from pathlib import Path

from querystudio.core.config import settings

logger = logging.getLogger(__name__)


def get_app_version(manifest_path: str | Path | None = None) -> str:
    """Return ``info.productVersion`` from the app manifest, or "" if it has none."""
    path = Path(manifest_path) if manifest_path else settings.app_manifest_path
    manifest = json.loads(path.read_text(encoding="utf-8"))

    info = manifest.get("info") if isinstance(manifest, dict) else None
    version = info.get("productVersion") if isinstance(info, dict) else None
    if version is None:
        logger.debug("No info.productVersion in %s", path)
        return ""

    if isinstance(version, str):
        return version
    return json.dumps(version)
