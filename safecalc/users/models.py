"""
User record used by the full-name formatter.

Any mapping with first_name/last_name keys is accepted as well;
the dataclass exists for callers that prefer a typed record.
"""

from dataclasses import dataclass


@dataclass
class User:
    first_name: str
    last_name: str
