from __future__ import annotations

import random
import string
import threading

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
REQUEST_ID_LENGTH = 10

_local = threading.local()


def _thread_random() -> random.Random:
    """Return the calling thread's own generator, seeding it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        # Random() with no seed pulls from os.urandom
        rng = random.Random()
        _local.rng = rng
    return rng


def generate_request_id() -> str:
    rng = _thread_random()
    return "".join(rng.choice(ALPHABET) for _ in range(REQUEST_ID_LENGTH))
