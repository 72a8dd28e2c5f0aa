from logging import LoggerAdapter
from typing import Optional

import argparse
import json
import logging
import sys

from noncereuse.config import readValues, formatValues, defaultPath, defaultLogLevel
from noncereuse.curve import hashMessage, signraw
from noncereuse.errors import InputFormatError, PreconditionError
from noncereuse.reuse import recover

EXIT_INPUT = 2
EXIT_PRECONDITION = 3

def hexInt(value: str) -> int:
	try:
		return int(value, 16)
	except ValueError:
		raise argparse.ArgumentTypeError(f'{value!r} is not a hexadecimal number')

def cmdRecover(args: argparse.Namespace, logger: LoggerAdapter) -> int:
	path = args.config or defaultPath()
	values = readValues(path, logger)
	result = recover(**values)
	logger.debug(f'recovered k and d from {path}')

	if args.json:
		print(json.dumps({'k': f'{result.k:x}', 'd': f'{result.d:x}'}))
		return 0

	print('Arithmetic completed for the supplied signature pair.')
	print(f'Reused k (hex): {result.k:x}')
	print(f'Private key d (hex): {result.d:x}')
	print('These values are only meaningful if both signatures really used the same nonce.')
	return 0

def cmdSample(args: argparse.Namespace, logger: LoggerAdapter) -> int:
	m1, m2 = args.messages[0].encode(), args.messages[1].encode()
	if m1 == m2:
		raise PreconditionError('the two messages must differ', 'h1 - h2')

	h1, h2 = hashMessage(m1), hashMessage(m2)
	r, s1 = signraw(h1, args.priv, args.nonce)
	_, s2 = signraw(h2, args.priv, args.nonce)
	if s1 == s2:
		raise PreconditionError('both signatures share s, pick other messages', 's1 - s2')

	text = formatValues({'s1': s1, 's2': s2, 'r': r, 'h1': h1, 'h2': h2})
	if args.output is None:
		sys.stdout.write(text)
	else:
		with open(args.output, 'w') as f:
			f.write(text)
		logger.info(f'wrote sample signature pair to {args.output}')

	return 0

def buildParser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog='noncereuse', description='Recover an ECDSA (secp256k1) private key from two signatures that reused a nonce.')
	parser.add_argument('-v', '--verbose', action='store_true', help='log debug output')
	parser.set_defaults(func=cmdRecover, config=None, json=False)
	sub = parser.add_subparsers(dest='command')

	rec = sub.add_parser('recover', help='recover k and d from a five line hex file (s1, s2, r, h1, h2)')
	rec.add_argument('config', nargs='?', help='input file (default: $NONCEREUSE_CONFIG or config.txt)')
	rec.add_argument('--json', action='store_true', help='print the result as JSON')
	rec.set_defaults(func=cmdRecover)

	sample = sub.add_parser('sample', help='sign two messages with one nonce and write a recover input file')
	sample.add_argument('--priv', type=hexInt, required=True, help='private key d (hex)')
	sample.add_argument('--nonce', type=hexInt, required=True, help='nonce k to reuse (hex)')
	sample.add_argument('-o', '--output', help='write to this file instead of stdout')
	sample.add_argument('messages', nargs=2, metavar='MESSAGE')
	sample.set_defaults(func=cmdSample)

	return parser

def main(argv: Optional[list[str]] = None) -> int:
	args = buildParser().parse_args(argv)
	level = logging.DEBUG if args.verbose else defaultLogLevel()
	logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)
	logger = LoggerAdapter(logging.getLogger('noncereuse'), {})

	try:
		return args.func(args, logger)
	except InputFormatError as e:
		print(f'Input error: {e}', file=sys.stderr)
		return EXIT_INPUT
	except PreconditionError as e:
		logger.critical(f'precondition on {e.name} failed')
		print(f'Precondition violated: {e}', file=sys.stderr)
		return EXIT_PRECONDITION

if __name__ == '__main__':
	sys.exit(main())
