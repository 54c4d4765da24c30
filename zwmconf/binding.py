"""Key and mouse bindings parsed from combos such as ``CM-Return`` or ``M-1``."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
NO_FUNCTION = "None"


class Modifier(enum.IntFlag):
    """X11 modifier masks that may prefix a combo."""

    SHIFT = 1 << 0
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD4 = 1 << 6
    MOD5 = 1 << 7


_MODIFIER_CHARS = {
    "S": Modifier.SHIFT,
    "C": Modifier.CONTROL,
    "M": Modifier.MOD1,
    "4": Modifier.MOD4,
    "5": Modifier.MOD5,
}


class EventType(enum.Enum):
    """Kind of input event a binding reacts to."""

    KEY = "key"
    BUTTON = "button"


class BindingError(ValueError):
    """Raised when a binding definition cannot be used."""


@dataclass(frozen=True)
class BindingDef:
    """A binding as written in the configuration."""

    keycombo: str
    function: str = NO_FUNCTION
    path: str = ""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_combo(combo: str) -> tuple[Modifier, str]:
    """Split a combo into its modifier mask and its key or button symbol.

    Everything before the first ``-`` must be modifier letters; raises
    BindingError otherwise.
    """
    prefix, dash, symbol = combo.partition("-")
    if not dash:
        return Modifier(0), combo
    mask = Modifier(0)
    for ch in prefix:
        try:
            mask |= _MODIFIER_CHARS[ch]
        except KeyError:
            raise BindingError(f"modkey ({combo}) is not valid") from None
    return mask, symbol


@dataclass(frozen=True)
class Binding:
    """A validated binding of a key or mouse button combo to a function."""

    keycombo: str
    function: str
    event_type: EventType
    modmask: Modifier
    keysym: str | None = None
    button: int | None = None
    path: str = ""

    @classmethod
    def from_def(cls, bdef: BindingDef, event_type: EventType) -> Binding:
        """Validate a definition; raises BindingError if it is unusable."""
        modmask, symbol = parse_combo(bdef.keycombo)
        keysym = button = None
        if event_type is EventType.KEY:
            if not symbol or any(ch.isspace() for ch in symbol):
                raise BindingError(f"keysym ({symbol}) was not found")
            keysym = symbol
        else:
            button = _leading_int(symbol)
            if not 1 <= button <= 5:
                raise BindingError(f"mouse button ({button}) is not valid")

        if not bdef.function or bdef.function == NO_FUNCTION:
            raise BindingError(f"function ({bdef.function}) is not defined")

        binding = cls(
            keycombo=bdef.keycombo,
            function=bdef.function,
            event_type=event_type,
            modmask=modmask,
            keysym=keysym,
            button=button,
            path=bdef.path,
        )
        log.debug("define {%s} -> %s(%s)", binding.keycombo, binding.function, binding.path)
        return binding

    def same_combo(self, other: Binding) -> bool:
        """Whether both bindings are triggered by the same input."""
        if self.modmask != other.modmask:
            return False
        if self.event_type is EventType.KEY:
            return self.keysym == other.keysym
        return self.button == other.button