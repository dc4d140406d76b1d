"""
Evaluation engine for podcheck.

- NamespaceIndex: name -> namespace lookup for joining pods
- CheckRunner: runs a check over every pod, streaming its records
"""

from podcheck.engine.index import NamespaceIndex
from podcheck.engine.runner import CheckRunner, run_check

__all__ = [
    "CheckRunner",
    "NamespaceIndex",
    "run_check",
]
