import os

TRACING = __debug__ and os.environ.get("SLY_DEBUG", "") not in ("", "0")

if TRACING:
	from functools import wraps
	import sys
	def debug(*args, **kws):
		# Looked up per call so redirected stderr is honoured.
		kws.setdefault("file", sys.stderr)
		print("[DEBUG]", *args, **kws)

	def _bound_class(fn, args):
		# A classmethod receives its class first; the qualname already names it.
		if args and isinstance(args[0], type):
			return f".{fn.__qualname__}".endswith(f".{args[0].__name__}.{fn.__name__}")
		return False

	def _format_call(fn, args, kws):
		if _bound_class(fn, args):
			args = args[1:]
		shown = [*map(repr, args), *(f"{k}={v!r}" for k, v in kws.items())]
		return f"{fn.__qualname__}({', '.join(shown)})"

	def trace_entry(fn):
		@wraps(fn)
		def _(*args, **kws):
			debug(f"CALL: {_format_call(fn, args, kws)}")
			return fn(*args, **kws)
		return _

	def trace_exit(fn):
		@wraps(fn)
		def _(*args, **kws):
			result = fn(*args, **kws)
			debug(f"RETN: {_format_call(fn, args, kws)} -> {result!r}")
			return result
		return _

else:
	def debug(*args, **kws):
		pass
	def trace_entry(fn):
		return fn
	def trace_exit(fn):
		return fn
