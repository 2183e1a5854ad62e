"""Reusable argument guards for value-object construction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


_ALPHANUMERICS_AND_SPACES = re.compile(r"[A-Za-z0-9 ]+")


@dataclass(frozen=True)
class GuardResult:
    succeeded: bool
    message: str = ""


_PASSED = GuardResult(succeeded=True)


class Guard:
    @staticmethod
    def against_null_or_undefined(argument: Any, argument_name: str) -> GuardResult:
        if argument is None:
            return GuardResult(False, f"{argument_name} is null or undefined.")
        return _PASSED

    @staticmethod
    def is_string(argument: Any, argument_name: str) -> GuardResult:
        if not isinstance(argument, str):
            return GuardResult(False, f"{argument_name} must be a string.")
        return _PASSED

    @staticmethod
    def in_range(value: int, minimum: int, maximum: int, argument_name: str) -> GuardResult:
        if not minimum <= value <= maximum:
            return GuardResult(
                False,
                f"{argument_name} is not within range {minimum} to {maximum}.",
            )
        return _PASSED

    @staticmethod
    def is_integer(argument: Any, argument_name: str) -> GuardResult:
        # bool is an int subclass; JSON true/false are not coordinates.
        if isinstance(argument, bool):
            return GuardResult(False, f"{argument_name} is not an integer.")
        if isinstance(argument, int):
            return _PASSED
        if isinstance(argument, float) and argument.is_integer():
            return _PASSED
        return GuardResult(False, f"{argument_name} is not an integer.")

    @staticmethod
    def only_contains_spaces(argument: str) -> bool:
        return argument.strip() == ""

    @staticmethod
    def only_contains_alphanumerics_and_spaces(argument: str, argument_name: str) -> GuardResult:
        if _ALPHANUMERICS_AND_SPACES.fullmatch(argument) is None:
            return GuardResult(False, f"{argument_name} must be alphanumeric.")
        return _PASSED
