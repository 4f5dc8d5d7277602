"""Application settings management."""

import json
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import Any, Optional
import logging

from ..core.events import Event, EventBus, EventType
from .paths import APP_NAME, get_app_data_dir

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"


@dataclass
class Settings:
    """Application settings with defaults."""

    # Image quality percentage used when re-encoding (1-100)
    quality: int = field(default=70, metadata={"key": "Quality", "type": int})

    # Remove the original image once the slimmed copy is written
    delete_source_after_processing: bool = field(
        default=False,
        metadata={"key": "DeleteBaseImagesAfterProcessing", "type": bool},
    )

    # Number of images processed in parallel
    parallel_worker_count: int = field(
        default=8, metadata={"key": "ParallelProcessingThreadsCount", "type": int}
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk key names."""
        return {f.metadata["key"]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "Settings":
        """Build settings from a decoded JSON document.

        Absent keys keep their defaults and unknown keys are ignored.

        Args:
            data: Decoded JSON value (None yields defaults)

        Returns:
            The settings

        Raises:
            ValueError: If the document is not an object or a field has the wrong type
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"settings root must be an object, got {type(data).__name__}")

        values = {}
        for f in fields(cls):
            key = f.metadata["key"]
            if key not in data:
                continue
            values[f.name] = _check_type(key, data[key], f.metadata["type"])

        return cls(**values)


def _check_type(key: str, value: Any, expected: type) -> Any:
    # bool is a subclass of int, so it needs its own check
    if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    if expected is bool and not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean, got {value!r}")
    return value


@dataclass
class StoreResult:
    """Outcome of a load or save.

    On failure ``settings`` holds the defaults (load) or the value that
    could not be written (save).
    """

    ok: bool
    settings: Settings
    error: Optional[str] = None


class SettingsStore:
    """Manages settings persistence in the app data directory."""

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        event_bus: Optional[EventBus] = None,
        filename: str = SETTINGS_FILE_NAME,
    ):
        """Initialize the settings store.

        Args:
            data_dir: Directory holding the settings file (platform app data dir if None)
            event_bus: Bus to publish load/save outcomes on
            filename: Name of the settings file
        """
        self._data_dir = Path(data_dir) if data_dir is not None else get_app_data_dir(APP_NAME)
        self._settings_file = self._data_dir / filename
        self._event_bus = event_bus

    def try_load(self) -> StoreResult:
        """Load settings from disk, reporting failures.

        Returns:
            The result; defaults are used for a missing file or any failure
        """
        try:
            if not self._settings_file.exists():
                logger.info("No settings file found, using defaults")
                result = StoreResult(ok=True, settings=Settings())
            else:
                with open(self._settings_file, "r", encoding="utf-8-sig") as f:
                    text = f.read()
                data = json.loads(text) if text.strip() else None
                result = StoreResult(ok=True, settings=Settings.from_dict(data))
                logger.info(f"Settings loaded from {self._settings_file}")
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.warning(f"Error loading settings, using defaults: {e}")
            result = StoreResult(ok=False, settings=Settings(), error=str(e))

        self._publish(EventType.SETTINGS_LOADED if result.ok else EventType.SETTINGS_LOAD_FAILED, result)
        return result

    def load(self) -> Settings:
        """Load settings from disk or return defaults.

        Returns:
            The loaded or default settings
        """
        return self.try_load().settings

    def try_save(self, settings: Settings) -> StoreResult:
        """Save settings to disk, reporting failures.

        The file is overwritten in place; no backup is kept.

        Args:
            settings: Settings to save

        Returns:
            The result of the write
        """
        try:
            text = json.dumps(settings.to_dict(), indent=2)
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with open(self._settings_file, "w", encoding="utf-8") as f:
                f.write(text)
            logger.info(f"Settings saved to {self._settings_file}")
            result = StoreResult(ok=True, settings=settings)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving settings: {e}")
            result = StoreResult(ok=False, settings=settings, error=str(e))

        self._publish(EventType.SETTINGS_SAVED if result.ok else EventType.SETTINGS_SAVE_FAILED, result)
        return result

    def save(self, settings: Settings) -> bool:
        """Save settings to disk.

        Args:
            settings: Settings to save

        Returns:
            True if the file was written
        """
        return self.try_save(settings).ok

    def _publish(self, event_type: EventType, result: StoreResult) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(Event(event_type, result))

    @property
    def path(self) -> Path:
        """Get the settings file path."""
        return self._settings_file

    @property
    def data_dir(self) -> Path:
        """Get the settings directory path."""
        return self._data_dir
