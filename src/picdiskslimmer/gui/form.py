"""Conversion between dialog widget values and settings.

Kept free of tkinter so it can be used without a display.
"""

from typing import Union

from ..storage.settings import Settings

QUALITY_MIN = 1
QUALITY_MAX = 100

WORKER_CHOICES = [1, 2, 4, 8, 16, 32]


def settings_from_form(
    quality: Union[int, float, str],
    delete_source: bool,
    worker_count: Union[int, str],
) -> Settings:
    """Build settings from raw widget values.

    Quality is clamped to 1-100 and the worker count to at least 1.
    Unparseable values fall back to the defaults.

    Args:
        quality: Slider value (may be a float)
        delete_source: Checkbox value
        worker_count: Option menu value (a string from the widget)

    Returns:
        The settings to save
    """
    defaults = Settings()

    try:
        quality_value = int(round(float(quality)))
    except (TypeError, ValueError):
        quality_value = defaults.quality
    quality_value = max(QUALITY_MIN, min(QUALITY_MAX, quality_value))

    try:
        workers = int(str(worker_count).strip())
    except (TypeError, ValueError):
        workers = defaults.parallel_worker_count
    workers = max(1, workers)

    return Settings(
        quality=quality_value,
        delete_source_after_processing=bool(delete_source),
        parallel_worker_count=workers,
    )


def worker_choices(current: int) -> list[str]:
    """Get option menu values, including the current count if it is not a preset."""
    choices = list(WORKER_CHOICES)
    if current not in choices and current >= 1:
        choices.append(current)
        choices.sort()
    return [str(c) for c in choices]
