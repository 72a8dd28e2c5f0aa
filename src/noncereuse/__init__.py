from noncereuse.errors import ReuseError, InputFormatError, PreconditionError
from noncereuse.reuse import Recovered, modular_inverse, modular_division, derive_k, derive_d, recover
