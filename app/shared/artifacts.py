from pathlib import Path
import uuid, json
from datetime import datetime, timezone

from app.shared.config import STORAGE_DIR

ART_DIR = STORAGE_DIR / "artifacts"

def new_name(prefix: str, ext: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}.{ext.lstrip('.')}"

def save_json(prefix: str, payload: dict, directory: Path | None = None) -> str:
    out_dir = directory or ART_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / new_name(prefix, "json")
    payload = {"_saved_at": datetime.now(timezone.utc).isoformat(), **payload}
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return str(path)
