from css_sync.cli.main import cli

__all__ = ["cli"]
