from .source_parser import GoSourceParser

__all__ = ["GoSourceParser"]
