"""Per-application data directory lookup."""

import os
import sys
from pathlib import Path

APP_NAME = "PicDiskSlimmer"


def get_app_data_dir(app_name: str = APP_NAME) -> Path:
    """Get the private data directory for the application on this platform.

    The directory is not created here.

    Args:
        app_name: Name of the application (last path component)

    Returns:
        The directory path
    """
    if os.name == "nt":  # Windows
        base = Path(os.environ.get("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:  # Linux and other unix
        base = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")

    return base / app_name
