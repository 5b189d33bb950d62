"""TopTop: a short-video sharing service."""

__version__ = "0.1.0"
