"""drumjot - bar segmentation and grid layout for percussion loops."""

__version__ = "0.1.0"
