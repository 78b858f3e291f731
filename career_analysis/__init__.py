"""Resume and LinkedIn profile match analysis pipeline."""

__version__ = "0.1.0"
