"""Interactive Mandelbrot, Julia and Burning Ship fractal explorer, with XPM reading."""

__version__ = "1.0.0"
__all__ = ["__version__"]