from typing import Optional


class ReuseError(Exception):
	pass


class InputFormatError(ReuseError):
	"""The five-line input could not be turned into integers."""

	def __init__(self, message: str, line: Optional[int] = None, name: Optional[str] = None):
		if line is not None:
			prefix = f'line {line}' if name is None else f'line {line} ({name})'
			message = f'{prefix}: {message}'
		super().__init__(message)
		self.line = line
		self.name = name


class PreconditionError(ReuseError):
	"""A denominator has no inverse modulo the curve order."""

	def __init__(self, message: str, name: Optional[str] = None):
		super().__init__(message)
		self.name = name
