from pathlib import Path


def test_icon_image_has_requested_size():
    from picdiskslimmer.gui.icon import create_icon_image

    for size in (16, 64, 256):
        img = create_icon_image(size)
        assert img.size == (size, size)
        assert img.mode == "RGBA"

    # Corners stay transparent, the center is drawn
    img = create_icon_image(128)
    assert img.getpixel((0, 0))[3] == 0
    assert img.getpixel((64, 64))[3] == 255


def test_save_icon_writes_ico(tmp_path: Path):
    from PIL import Image

    from picdiskslimmer.gui.icon import ICON_SIZES, save_icon

    path = save_icon(tmp_path / "assets" / "icon.ico")
    assert path.exists()

    with Image.open(path) as ico:
        assert ico.format == "ICO"
        assert set(ico.info["sizes"]) == {(s, s) for s in ICON_SIZES}
