"""Recovery of k and d from two ECDSA signatures that reused the nonce k.

Two signatures made with the same private key d and nonce k share r and satisfy

	s1 = k^-1 (h1 + r*d)  and  s2 = k^-1 (h2 + r*d)   (mod n)

Subtracting eliminates d:

	k = (h1 - h2) / (s1 - s2)   (mod n)

after which the first equation solves for the private key:

	d = (k*s1 - h1) / r         (mod n)

All division is multiplication by the inverse modulo the curve order. Nothing
here can tell whether the nonce really was reused; for unrelated signatures the
arithmetic still completes and yields meaningless values.
"""

from typing import NamedTuple

from gmpy2 import mpz, powmod, gcd

from noncereuse.curve import CURVE_ORDER
from noncereuse.errors import PreconditionError


class Recovered(NamedTuple):
	k: int
	d: int


def modular_inverse(a: int, n: int) -> int:
	# Fermat: n is prime, so a^(n-2) = a^-1. Yields 0 for a = 0 mod n, callers check.
	return int(powmod(mpz(a) % n, n - 2, n))


def modular_division(numerator: int, denominator: int, n: int = CURVE_ORDER, name: str = 'denominator') -> int:
	if gcd(mpz(denominator) % n, n) != 1:
		raise PreconditionError(f'{name} is not invertible modulo the curve order', name)
	return int((mpz(numerator) * modular_inverse(denominator, n)) % n)


def derive_k(h1: int, h2: int, s1: int, s2: int) -> int:
	if (s1 - s2) % CURVE_ORDER == 0:
		raise PreconditionError('s1 and s2 are equal modulo the curve order, k cannot be solved for', 's1 - s2')
	return modular_division(h1 - h2, s1 - s2, name='s1 - s2')


def derive_d(k: int, s1: int, h1: int, r: int) -> int:
	if r % CURVE_ORDER == 0:
		raise PreconditionError('r is zero modulo the curve order, d cannot be solved for', 'r')
	return modular_division(k * s1 - h1, r, name='r')


def recover(s1: int, s2: int, r: int, h1: int, h2: int) -> Recovered:
	k = derive_k(h1, h2, s1, s2)
	d = derive_d(k, s1, h1, r)

	return Recovered(k, d)
