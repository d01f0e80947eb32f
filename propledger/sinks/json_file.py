"""Versioned JSON snapshot storage."""

import json
import logging
from pathlib import Path
from typing import Any

from propledger.exceptions import SnapshotError
from propledger.models import LedgerState, Payment, Property, Tenant
from propledger.sinks.serialization import from_record, to_record
from propledger.store.seed import seed_state

logger = logging.getLogger(__name__)

CURRENT_VERSION = 1
SECTIONS = (("properties", Property), ("tenants", Tenant), ("payments", Payment))


class JsonSnapshotStorage:
    """Load and save the whole ledger state as one JSON document."""

    def __init__(
        self,
        path: str | Path,
        pretty: bool = False,
        seed_on_empty: bool = True,
    ) -> None:
        """Initialize snapshot storage.

        Parameters
        ----------
        path : str | Path
            Snapshot file location.
        pretty : bool
            Pretty-print JSON output.
        seed_on_empty : bool
            Write and return the demo portfolio when no snapshot exists.
        """
        self.path = Path(path)
        self.pretty = pretty
        self.seed_on_empty = seed_on_empty
        self.skipped = 0

    def load(self) -> LedgerState:
        """Read the snapshot, tolerating older layouts.

        Missing sections load as empty and individual malformed records are
        skipped; ``skipped`` holds how many were dropped.

        Raises
        ------
        SnapshotError
            If the file is not valid JSON or not a JSON object.
        """
        if not self.path.exists():
            if not self.seed_on_empty:
                logger.warning("No snapshot at %s, starting empty", self.path)
                return LedgerState()
            logger.info("No snapshot at %s, seeding demo portfolio", self.path)
            state = seed_state()
            self.save(state)
            return state

        data = self._read(self.path)
        version = data.get("version")
        if not isinstance(version, int) or version < CURRENT_VERSION:
            logger.info("Upgrading snapshot %s from version %s", self.path, version)

        return self._decode(data, strict=False)

    def save(self, state: LedgerState) -> None:
        """Write the snapshot, replacing any previous file."""
        document = {
            "version": CURRENT_VERSION,
            "properties": [to_record(p) for p in state.properties],
            "tenants": [to_record(t) for t in state.tenants],
            "payments": [to_record(p) for p in state.payments],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(document, f, indent=2, ensure_ascii=False)
            else:
                json.dump(document, f, ensure_ascii=False)
        tmp_path.replace(self.path)
        logger.debug("Saved snapshot %s: %s", self.path, state.summary())

    def restore(self, source: str | Path) -> LedgerState:
        """Replace the stored snapshot with a backup file.

        Unlike ``load``, the backup must carry all three sections.

        Raises
        ------
        SnapshotError
            If the backup is unreadable or missing a section.
        """
        data = self._read(Path(source))
        state = self._decode(data, strict=True)
        self.save(state)
        logger.info("Restored snapshot from %s: %s", source, state.summary())
        return state

    def _read(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Snapshot {path} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot {path} must contain a JSON object")
        return data

    def _decode(self, data: dict[str, Any], strict: bool) -> LedgerState:
        self.skipped = 0
        sections: dict[str, list[Any]] = {}
        for key, cls in SECTIONS:
            raw = data.get(key)
            if raw is None and not strict:
                raw = []
            if not isinstance(raw, list):
                raise SnapshotError(f"Snapshot section {key!r} must be a list")

            records = []
            for item in raw:
                try:
                    records.append(from_record(cls, item))
                except ValueError as exc:
                    self.skipped += 1
                    logger.warning("Skipping malformed %s record: %s", key, exc)
            sections[key] = records

        if self.skipped:
            logger.warning("Skipped %d malformed records", self.skipped)

        return LedgerState.of(sections["properties"], sections["tenants"], sections["payments"])
