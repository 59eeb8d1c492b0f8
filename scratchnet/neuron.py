"""A single neuron holding a raw value and its fast-sigmoid activation."""

from __future__ import annotations


class Neuron:
    """A neuron whose activation uses the fast sigmoid f(x) = x / (1 + |x|).

    The derivative is taken as f(x) * (1 - f(x)), computed from the
    activated value. Both are refreshed whenever the raw value changes.
    """

    __slots__ = ("_val", "_activated_val", "_derived_val")

    def __init__(self, val: float = 0.0) -> None:
        self._val = 0.0
        self._activated_val = 0.0
        self._derived_val = 0.0
        self.val = val

    @property
    def val(self) -> float:
        """The raw (pre-activation) value."""
        return self._val

    @val.setter
    def val(self, value: float) -> None:
        self._val = float(value)
        self._activated_val = self._val / (1.0 + abs(self._val))
        self._derived_val = self._activated_val * (1.0 - self._activated_val)

    @property
    def activated_val(self) -> float:
        """The value after the fast sigmoid."""
        return self._activated_val

    @property
    def derived_val(self) -> float:
        """The derivative term computed from the activated value."""
        return self._derived_val

    def __repr__(self) -> str:
        return f"Neuron(val={self._val!r})"