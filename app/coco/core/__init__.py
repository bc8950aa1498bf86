"""Core modules for coco.

Command parsing, the session runner, settings and theming.
"""
