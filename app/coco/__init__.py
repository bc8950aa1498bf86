"""coco - a small command-line file manager.

Recursive deletion and directory listing with glob filters and depth limits.
"""

__version__ = "0.1.0"
