"""Channel separation, grayscale, thresholding, blending and histograms for BMP and PNM images."""

__version__ = "0.1.0"
__all__ = ["__version__"]