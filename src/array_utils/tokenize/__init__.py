"""Tokenizer subsystem for array-utils."""

from array_utils.tokenize.splitter import split_by

__all__ = [
    "split_by",
]
