"""Code formatters for generated tests."""

from .code_formatter import CodeFormatter

__all__ = ["CodeFormatter"]
