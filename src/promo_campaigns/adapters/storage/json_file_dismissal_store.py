from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

import jsonschema

from promo_campaigns.application.errors import StateFileError
from promo_campaigns.ports.dismissal_store import (
    HAS_DISMISSED_BANNER_KEY,
    LAST_SEEN_CAMPAIGN_ID_KEY,
    DismissalStore,
)
from promo_campaigns.settings import get_settings

logger = logging.getLogger(__name__)

STATE_FILE_NAME = "promo_campaign.json"

DISMISSAL_STATE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        HAS_DISMISSED_BANNER_KEY: {"type": "boolean"},
        LAST_SEEN_CAMPAIGN_ID_KEY: {"type": "string"},
    },
}


class JsonFileDismissalStore(DismissalStore):
    """
    Persists the dismissal slots as one JSON document per storage group.

    The file is read on every access so separate processes pointed at the same
    group see each other's writes. Writes go to a temp file that is then
    renamed into place.
    """

    def __init__(self, state_dir: str | None = None, storage_group: str | None = None) -> None:
        settings = get_settings()
        self.storage_group = storage_group or settings.storage_group
        self.group_dir = Path(state_dir or settings.state_dir) / self.storage_group
        self.path = self.group_dir / STATE_FILE_NAME

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StateFileError(f"Invalid JSON in state file {self.path}: {e}", path=str(self.path)) from e
        except OSError as e:
            raise StateFileError(f"Cannot read state file {self.path}: {e}", path=str(self.path)) from e

        try:
            jsonschema.validate(instance=data, schema=DISMISSAL_STATE_SCHEMA)
        except jsonschema.ValidationError as e:
            raise StateFileError(
                f"State file {self.path} failed validation: {e.message}", path=str(self.path)
            ) from e
        return data

    def _save(self, data: dict[str, Any]) -> None:
        if not self.group_dir.exists():
            logger.debug(f"Creating state directory {self.group_dir}")
            self.group_dir.mkdir(parents=True, exist_ok=True)
        # Temp name is unique per write; concurrent writers in a group never share one.
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.group_dir, prefix=".promo_campaign.", suffix=".tmp", delete=False
        ) as f:
            json.dump(data, f, indent=2, sort_keys=True)
        try:
            os.replace(f.name, self.path)
        except OSError as e:
            os.unlink(f.name)
            raise StateFileError(f"Cannot write state file {self.path}: {e}", path=str(self.path)) from e

    def _set(self, key: str, value: Any) -> None:
        data = self._load()
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
        self._save(data)

    def get_has_dismissed_banner(self) -> Optional[bool]:
        return self._load().get(HAS_DISMISSED_BANNER_KEY)

    def set_has_dismissed_banner(self, value: Optional[bool]) -> None:
        self._set(HAS_DISMISSED_BANNER_KEY, value)

    def get_last_seen_campaign_id(self) -> Optional[str]:
        return self._load().get(LAST_SEEN_CAMPAIGN_ID_KEY)

    def set_last_seen_campaign_id(self, value: Optional[str]) -> None:
        self._set(LAST_SEEN_CAMPAIGN_ID_KEY, value)
