from logging import LoggerAdapter
from os import getenv

import re

from noncereuse.errors import InputFormatError

# Line order of the input file
FIELDS = ('s1', 's2', 'r', 'h1', 'h2')
DEFAULT_PATH = 'config.txt'

hexPattern = re.compile(r'[0-9a-fA-F]+')

def defaultPath() -> str:
	return getenv('NONCEREUSE_CONFIG', DEFAULT_PATH)

def defaultLogLevel() -> str:
	return getenv('NONCEREUSE_LOG_LEVEL', 'INFO').upper()

def parseValues(text: str, logger: LoggerAdapter) -> dict[str, int]:
	"""Parse five bare hex lines (s1, s2, r, h1, h2). Anything after the fifth line is ignored."""
	lines = text.splitlines()
	values: dict[str, int] = {}
	for idx, name in enumerate(FIELDS):
		lineNo = idx + 1
		if idx >= len(lines):
			logger.critical(f'input has {len(lines)} lines (expected {len(FIELDS)})')
			raise InputFormatError('missing value', lineNo, name)

		raw = lines[idx].strip()
		if not raw:
			logger.critical(f'line {lineNo} is empty')
			raise InputFormatError('empty value', lineNo, name)
		if not hexPattern.fullmatch(raw):
			logger.critical(f'line {lineNo} is not bare hexadecimal: {raw[:80]!r}')
			raise InputFormatError(f'not a hexadecimal number: {raw[:80]!r}', lineNo, name)

		values[name] = int(raw, 16)
		logger.debug(f'{name} = {values[name]:x}')

	return values

def readValues(path: str, logger: LoggerAdapter) -> dict[str, int]:
	logger.debug(f'reading signature data from {path}')
	try:
		with open(path) as f:
			text = f.read()
	except (OSError, UnicodeDecodeError) as e:
		logger.critical(f'could not read {path}: {e}')
		raise InputFormatError(f'could not read {path}: {e}') from e

	return parseValues(text, logger)

def formatValues(values: dict[str, int]) -> str:
	return ''.join(f'{values[name]:x}\n' for name in FIELDS)
