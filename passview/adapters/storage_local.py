from __future__ import annotations
import base64, json, logging, os, tempfile, time
from typing import Any, Dict, List, Optional

from passview.domain.ports import KeyValueStorePort, StoredValue

log = logging.getLogger(__name__)


class StorageLocal(KeyValueStorePort):
    """Local filesystem key-value store (single JSON document).

    Each entry is tagged so text and bytes survive the round-trip::

        {"userName": {"kind": "text", "value": "Alex"},
         "profileImage": {"kind": "bytes", "value": "<base64>"}}
    """

    FILENAME = "display_prefs.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILENAME)

    # ---- Port ----
    def load(self, key: str) -> Optional[StoredValue]:
        entry = self._read_document().get(key)
        if entry is None:
            return None
        return self._decode_entry(key, entry)

    def save(self, key: str, value: StoredValue) -> None:
        try:
            document = self._read_document()
        except ValueError as exc:
            # keep the damaged file for inspection and start over
            target = self._quarantine()
            log.warning("%s; moved to %s, starting a fresh store", exc, target)
            document = {}
        document[key] = self._encode_entry(value)
        self._write_document(document)
        log.debug("Stored %s (%s)", key, document[key]["kind"])

    def keys(self) -> List[str]:
        return sorted(self._read_document().keys())

    # ---- Internals ----
    def _read_document(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except (json.JSONDecodeError, RecursionError) as exc:
                raise ValueError(f"Corrupt store document {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Store document {self.path} must be a JSON object.")
        return payload

    def _quarantine(self) -> str:
        stamp = time.strftime("%Y%m%d-%H%M%S")
        target = f"{self.path}.corrupt-{stamp}"
        os.replace(self.path, target)
        return target

    def _write_document(self, document: Dict[str, Any]) -> None:
        os.makedirs(self.root, exist_ok=True)
        # write to a sibling temp file, then swap in place
        fd, tmp_path = tempfile.mkstemp(prefix="display_prefs_", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    @staticmethod
    def _encode_entry(value: StoredValue) -> Dict[str, str]:
        if isinstance(value, (bytes, bytearray)):
            return {"kind": "bytes", "value": base64.b64encode(bytes(value)).decode("ascii")}
        if isinstance(value, str):
            return {"kind": "text", "value": value}
        raise TypeError(f"Unsupported value type for store: {type(value).__name__}")

    @staticmethod
    def _decode_entry(key: str, entry: Any) -> StoredValue:
        if not isinstance(entry, dict) or "value" not in entry:
            raise ValueError(f"Malformed entry for key '{key}'.")
        kind = entry.get("kind")
        raw = entry["value"]
        if kind == "text":
            return str(raw)
        if kind == "bytes":
            try:
                return base64.b64decode(str(raw), validate=True)
            except ValueError as exc:
                raise ValueError(f"Invalid base64 payload for key '{key}'.") from exc
        raise ValueError(f"Unknown entry kind '{kind}' for key '{key}'.")
