"""
Runtime values of the language.

Every value kind derives directly from SchemeObject and supplies
repr_lines; the printer and evaluator dispatch on that without knowing the
concrete kind. Values are immutable: operations build new values.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
import operator

from sly.debug import trace_exit
from sly.numeric import parse_decimal, format_decimal


class SchemeObject(ABC):
	__slots__ = ()

	@abstractmethod
	def repr_lines(self) -> tuple[str, ...]:
		"""
		Canonical external text of the value, one string per line.
		Atomic values give exactly one line.
		"""

	def __repr__(self):
		return "\n".join(self.repr_lines())

	def __str__(self):
		return repr(self)


def _is_exact_int(value):
	# bool is an int subclass, but the language's booleans are not numbers.
	return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, repr=False)
class Integer(SchemeObject):
	"""An exact integer of unbounded magnitude."""
	value: int

	def __post_init__(self):
		value = self.value
		if isinstance(value, Integer):
			value = value.value
		elif not _is_exact_int(value):
			raise TypeError(
				f"Integer requires an exact integer, not {type(value).__name__}.")
		# Normalizes int subclasses down to plain int.
		object.__setattr__(self, "value", operator.index(value))

	@classmethod
	@trace_exit
	def from_exact(cls, value):
		return cls(value)

	@classmethod
	@trace_exit
	def from_native(cls, n):
		if isinstance(n, bool):
			raise TypeError("Integer cannot be built from a bool.")
		try:
			value = operator.index(n)
		except TypeError:
			raise TypeError(
				f"Integer requires a native integer, not {type(n).__name__}.") from None
		return cls(value)

	@classmethod
	@trace_exit
	def from_text(cls, text):
		return cls(parse_decimal(text))

	def repr_lines(self):
		return (format_decimal(self.value),)

	def __index__(self):
		return self.value

	def __int__(self):
		return self.value


__all__ = ["SchemeObject", "Integer"]
