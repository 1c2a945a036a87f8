from css_sync.formatter.emitter import INDENT, format_css
from css_sync.formatter.grouping import Bucket, group_declarations, plan_declarations
from css_sync.formatter.headers import HeaderMatcher, comment_text

__all__ = [
    "format_css",
    "INDENT",
    "Bucket",
    "group_declarations",
    "plan_declarations",
    "HeaderMatcher",
    "comment_text",
]
