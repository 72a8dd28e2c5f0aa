from hashlib import sha256

from ecdsa import SigningKey, SECP256k1

from noncereuse.curve import G, signraw
from noncereuse.reuse import recover

def rawSig(r, s, order):
	return r, s

def test_recover_from_ecdsa_library():
	d = 0x69420deadbeef
	k = 0x1337c0ffee
	sk = SigningKey.from_secret_exponent(d, curve=SECP256k1)
	digest1 = sha256(b'I flagshared in an A/D').digest()
	digest2 = sha256(b'I leaked flags in the discord').digest()
	r1, s1 = sk.sign_digest(digest1, sigencode=rawSig, k=k)
	r2, s2 = sk.sign_digest(digest2, sigencode=rawSig, k=k)
	assert r1 == r2

	h1 = int.from_bytes(digest1)
	h2 = int.from_bytes(digest2)
	result = recover(s1, s2, r1, h1, h2)
	assert result.k == k
	assert result.d == d
	assert sk.privkey.secret_multiplier == result.d

def test_signraw_matches_ecdsa_library():
	d, k = 123456789, 7
	sk = SigningKey.from_secret_exponent(d, curve=SECP256k1)
	digest = sha256(b'hello').digest()
	r, s = sk.sign_digest(digest, sigencode=rawSig, k=k)
	assert signraw(int.from_bytes(digest), d, k) == (r, s)

def test_generator_matches_ecdsa_library():
	gen = SECP256k1.generator
	assert (G.x, G.y) == (gen.x(), gen.y())
	pub = SigningKey.from_secret_exponent(5, curve=SECP256k1).get_verifying_key().pubkey.point
	P = G.mul(5)
	assert (P.x, P.y) == (pub.x(), pub.y())
