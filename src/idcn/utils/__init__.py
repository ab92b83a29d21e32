"""Utility functions for idcn."""

from idcn.utils.text import mask_id_card, sanitize_for_logging

__all__ = ["mask_id_card", "sanitize_for_logging"]
