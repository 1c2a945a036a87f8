from css_sync.parser.scanner import parse

__all__ = ["parse"]
