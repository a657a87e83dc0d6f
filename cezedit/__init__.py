"""Gap-buffer text editor with a compressed CEZ document format."""

__version__ = "0.1.0"