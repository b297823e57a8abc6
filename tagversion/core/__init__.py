from .interfaces import OutputSink, TagSource

__all__ = ["OutputSink", "TagSource"]
