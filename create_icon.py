"""Generate application icon files for PicDiskSlimmer."""

import sys
from pathlib import Path

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent / "src"))

from picdiskslimmer.gui.icon import create_icon_image, save_icon


def create_icon():
    """Write assets/icon.ico and assets/icon.png next to this script."""
    assets_dir = Path(__file__).parent / "assets"

    ico_path = save_icon(assets_dir / "icon.ico")
    png_path = assets_dir / "icon.png"
    create_icon_image(256).save(png_path, format="PNG")

    print(f"Icon created: {ico_path} and {png_path}")


if __name__ == "__main__":
    create_icon()
