class SlyError(Exception):
	"""Base of every error raised by the runtime's value layer."""
	def __init__(self, msg):
		super().__init__(msg)
		self.msg = msg
	def __str__(self):
		return self.msg


class MalformedIntegerLiteral(SlyError, ValueError):
	def __init__(self, text):
		super().__init__(f"Malformed integer literal: {text!r}")
		self.text = text
