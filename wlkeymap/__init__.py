"""Set the keyboard layout on Wayland desktops and compositors."""

__version__ = "0.1.0"
__all__ = ["__version__"]