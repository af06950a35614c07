from .text_source_port import TextSourcePort

__all__ = ["TextSourcePort"]
