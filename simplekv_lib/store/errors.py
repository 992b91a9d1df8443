"""Rejection reasons reported by store operations.

Store operations never raise these; callers see `None`, `False` or `-1`.
The kind is attached to the debug log line emitted for every rejection.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
