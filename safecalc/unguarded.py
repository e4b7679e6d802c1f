"""
Unguarded versions of the safecalc utilities.

These do the arithmetic and nothing else, so bad input surfaces as
whatever Python happens to raise (ZeroDivisionError, TypeError,
KeyError) or as a silently wrong value (nan, inf, stray whitespace).
They are kept next to the guarded versions for comparison.
"""

from __future__ import annotations


def calculate_average_score(scores, total_possible):
    total = 0
    for score in scores:
        total += score
    average = total / len(scores)
    return (average / total_possible) * 100


def get_user_full_name(user):
    return user["first_name"] + " " + user["last_name"]


def divide(dividend, divisor):
    return dividend / divisor
