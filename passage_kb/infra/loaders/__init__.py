from .text_file_loader import CachedTextFileLoader

__all__ = ["CachedTextFileLoader"]
