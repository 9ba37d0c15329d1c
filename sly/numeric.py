"""
Conversion between exact integers and their decimal literal text.

CPython refuses to convert between int and str past a configurable number
of digits (sys.get_int_max_str_digits). Exact integers have no bound, so
long inputs are split into chunks under that ceiling and reassembled.
"""
import re
import sys

from sly.debug import trace_entry
from sly.errors import MalformedIntegerLiteral


INTEGER_LITERAL = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")


def _digit_ceiling():
	# Zero means the interpreter enforces no limit.
	return sys.get_int_max_str_digits()


def _digits_to_int(digits, ceiling):
	if ceiling == 0 or len(digits) <= ceiling:
		return int(digits)
	k = len(digits) // 2
	high = _digits_to_int(digits[:-k], ceiling)
	low = _digits_to_int(digits[-k:], ceiling)
	return high * 10**k + low


def _int_to_digits(n, ceiling):
	bits = n.bit_length()
	# Upper bound on the digit count of n.
	if ceiling == 0 or bits * 30103 // 100000 + 1 <= ceiling:
		return str(n)
	# Lower bound on the digit count, halved, keeps the high part nonzero.
	k = ((bits - 1) * 30103 // 100000) // 2
	high, low = divmod(n, 10**k)
	return _int_to_digits(high, ceiling) + _int_to_digits(low, ceiling).zfill(k)


@trace_entry
def parse_decimal(text):
	"""
	Parse an optionally signed run of ASCII decimal digits.

	Anything else (whitespace, underscores, non-ASCII digits, a lone or
	doubled sign) is a MalformedIntegerLiteral, even where Python's own
	int() would accept it.
	"""
	if not isinstance(text, str):
		raise TypeError(f"Integer literal must be str, not {type(text).__name__}.")
	match = INTEGER_LITERAL.fullmatch(text)
	if match is None:
		raise MalformedIntegerLiteral(text)
	n = _digits_to_int(match["digits"], _digit_ceiling())
	return -n if match["sign"] == "-" else n


def format_decimal(n: int) -> str:
	if n < 0:
		return "-" + _int_to_digits(-n, _digit_ceiling())
	return _int_to_digits(n, _digit_ceiling())
