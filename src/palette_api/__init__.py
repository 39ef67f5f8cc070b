"""Palette API - image dominant color and palette service.

Extracts the dominant color and a small palette from an uploaded image and
labels each color with the nearest reference name in English and Chinese.
"""

__version__ = "0.1.0"
