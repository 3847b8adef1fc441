"""Exception hierarchy for array-utils.

All exceptions derive from ArrayUtilsError, enabling broad catch patterns
at the caller boundary while allowing fine-grained handling internally.
"""


class ArrayUtilsError(Exception):
    """Base exception for all array-utils errors."""


class RangeError(ArrayUtilsError, IndexError):
    """An offset or slice bound lies outside the input.

    Raised before any work is done, e.g. when the tokenizer's ``start_with``
    is negative or beyond the end of the text, or when a slicing helper is
    asked for bounds the sequence does not have. Subclasses IndexError so
    callers catching the builtin still see it.
    """


class ConfigValidationError(ArrayUtilsError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys, attempt to override
    fields that are fixed for the toolkit's lifetime, or name a tie-break
    policy that is not registered.
    """
