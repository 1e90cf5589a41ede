"""Small applications as plain objects: a to-do list, a system load monitor and a photo gallery."""

__version__ = "0.1.0"