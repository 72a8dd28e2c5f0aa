from hashlib import sha256

from noncereuse.errors import PreconditionError

# secp256k1
p = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
a = 0
b = 7
O = 0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141
CURVE_ORDER = O

class Point:
	def __init__(self, x: int, y: int):
		self.x = x
		self.y = y

	def __str__(self):
		return f'({self.x}, {self.y})'

	def __repr__(self):
		return str(self)

	def __eq__(self, other: object):
		if not isinstance(other, Point):
			return NotImplemented
		return self.x == other.x and self.y == other.y

	def isOnCurve(self):
		return (self.y ** 2) % p == (self.x ** 3 + a * self.x + b) % p or self.isIdentity()

	def isIdentity(self):
		return self.x == 0 and self.y == 0

	def add(self, p2: 'Point') -> 'Point':
		if self.isIdentity():
			return Point(p2.x, p2.y)
		if p2.isIdentity():
			return Point(self.x, self.y)

		# P + (-P) has no slope, pow raises
		try:
			if self.x == p2.x and self.y == p2.y:
				slope = (3 * (self.x ** 2) + a) * pow(2 * self.y, -1, p)
				slope %= p
			else:
				slope = (p2.y - self.y) * pow(p2.x - self.x, -1, p)
				slope %= p
		except ValueError:
			return Point(0, 0)

		x3 = (slope ** 2) - self.x - p2.x
		y3 = slope * (self.x - x3) - self.y

		return Point(x3 % p, y3 % p)

	def mul(self, scalar: int) -> 'Point':
		base = Point(self.x, self.y)
		result = Point(0, 0)
		while scalar != 0:
			if scalar & 1 == 1:
				result = result.add(base)
			base = base.add(base)
			scalar >>= 1

		return result

G = Point(0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798, 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8)
assert G.isOnCurve()

def hashMessage(data: bytes) -> int:
	return int.from_bytes(sha256(data).digest()) % O

def signraw(z: int, priv: int, k: int) -> tuple[int, int]:
	"""Sign the hash z with an explicit nonce. Only meant for building demo vectors."""
	if not 0 < priv < O:
		raise PreconditionError('private key must lie in [1, n-1]', 'd')
	if not 0 < k < O:
		raise PreconditionError('nonce must lie in [1, n-1]', 'k')

	P = G.mul(k)
	r = P.x % O
	s = (pow(k, -1, O) * (z + r * priv)) % O
	if r == 0 or s == 0:
		raise PreconditionError('degenerate signature, pick another nonce', 'r' if r == 0 else 's')

	return r, s
