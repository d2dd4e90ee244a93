from __future__ import annotations

import operator
import re
from dataclasses import dataclass

from .errors import InvalidRoundCount

_NAME_RE = re.compile(r"^(?:siphash[-_ ]?)?(?:(\d+)[-_ ](\d+)|(\d)(\d))$")


def check_round_count(name: str, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"round count {name} must be an int, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"round count {name} must be an int, got {type(value).__name__}"
        ) from None
    if value <= 0:
        raise InvalidRoundCount(name, value)
    return value


@dataclass(frozen=True)
class SipHashParams:
    """
    Round counts for a SipHash-c-d instance.

    ``c`` rounds run per message block (and once more for the tail block),
    ``d`` rounds run during finalization.
    """

    c: int = 2
    d: int = 4

    def __post_init__(self):
        object.__setattr__(self, "c", check_round_count("c", self.c))
        object.__setattr__(self, "d", check_round_count("d", self.d))

    @property
    def name(self) -> str:
        return f"siphash-{self.c}-{self.d}"

    @classmethod
    def parse(cls, text: str) -> "SipHashParams":
        """
        Build parameters from a name such as ``"2-4"``, ``"siphash-1-3"`` or ``"SipHash24"``.

        Raises:
            ValueError: If the name does not describe a SipHash variant
            TypeError: If text is not a str
        """
        if not isinstance(text, str):
            raise TypeError(f"variant name must be a str, got {type(text).__name__}")
        match = _NAME_RE.match(text.strip().lower())
        if match is None:
            raise ValueError(f"Unsupported SipHash variant: {text!r}")
        c, d = (group for group in match.groups() if group is not None)
        return cls(int(c), int(d))


SIPHASH_2_4 = SipHashParams(2, 4)
SIPHASH_1_3 = SipHashParams(1, 3)


def resolve_params(params) -> SipHashParams:
    if isinstance(params, SipHashParams):
        return params
    if isinstance(params, str):
        return SipHashParams.parse(params)
    raise TypeError(f"params must be SipHashParams or str, got {type(params).__name__}")


__all__ = [
    "SipHashParams",
    "SIPHASH_2_4",
    "SIPHASH_1_3",
    "check_round_count",
    "resolve_params",
]
