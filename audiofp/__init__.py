"""Building blocks for audio fingerprinting: base64, bit packing, slicing, filters and integral images."""

__version__ = "0.1.0"

__all__ = ["base64", "bitpack", "slicer", "gaussian", "gradient", "integral_image"]