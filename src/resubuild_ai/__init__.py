"""AI prompt-assembly and response-normalization layer for the résumé builder."""

__version__ = "0.1.0"
