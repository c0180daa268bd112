"""
Module: pdf_converter.images

Purpose:
    Image input: content sniffing and decoding.

Key Functions:
    - sniff_format(), sniff_file(): Signature detection
    - decode_image(), load_image(): Pillow decoding

Key Classes:
    - ImageFormat: Supported input formats
    - DecodedImage: Decoded pixel buffer
    - ColorFormat: RGB / RGBA / Grayscale

Dependencies:
    - PIL: Image decoding
"""

from .sniffing import ImageFormat, sniff_file, sniff_format
from .decoder import ColorFormat, DecodedImage, decode_image, load_image

__all__ = [
    "ImageFormat",
    "sniff_file",
    "sniff_format",
    "ColorFormat",
    "DecodedImage",
    "decode_image",
    "load_image",
]
