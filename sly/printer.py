import sys

from sly.objects import SchemeObject


def _check(obj):
	if not isinstance(obj, SchemeObject):
		raise TypeError(f"Cannot print non-value {type(obj).__name__}.")


def to_text(obj):
	_check(obj)
	return "\n".join(obj.repr_lines())


def write(obj, file=None):
	"""Write each line of the value's external text, newline terminated."""
	_check(obj)
	if file is None:
		file = sys.stdout
	for line in obj.repr_lines():
		file.write(line + "\n")
