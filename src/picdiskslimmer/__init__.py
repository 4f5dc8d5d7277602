"""PicDiskSlimmer: image slimming settings."""

__version__ = "1.0.0"
