from logging import LoggerAdapter

import logging
import pytest

from noncereuse.curve import signraw

@pytest.fixture
def logger() -> LoggerAdapter:
	return LoggerAdapter(logging.getLogger('noncereuse.tests'), {})

@pytest.fixture
def reusedPair():
	"""Two signatures over h1 = 111 and h2 = 222 with d = 123456789 and k = 7."""
	d, k = 123456789, 7
	h1, h2 = 111, 222
	r, s1 = signraw(h1, d, k)
	r2, s2 = signraw(h2, d, k)
	assert r == r2
	return {'s1': s1, 's2': s2, 'r': r, 'h1': h1, 'h2': h2, 'k': k, 'd': d}
