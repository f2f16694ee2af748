"""
Source registry for eprng distributions.

Every data generator that can be tabulated and rendered lives here: the
eprng generators themselves plus a few baselines (uniform noise, dice,
RANDU) to compare the shape of their histograms against.

Canonical generator signature:
    (rng: np.random.Generator, size: int) -> np.ndarray (1-D)

Usage:
    from tools.sources import get_sources, get_source, seed_adapter

    for s in get_sources(domain="eprng"):
        data = s.gen_fn(rng, 16384)

    fn = seed_adapter(get_source("RANDU").gen_fn)
    data = fn(42, 2000)
"""

import warnings
import numpy as np
from dataclasses import dataclass
from typing import Callable, List, Optional

import eprng


# ================================================================
# Registry infrastructure
# ================================================================


@dataclass
class Source:
    name: str
    gen_fn: Callable  # (rng, size) -> 1-D array
    domain: str
    description: str = ""


_REGISTRY: List[Source] = []


def register(name, gen_fn, domain, description=""):
    """Imperative registration; a later source replaces one with the same name."""
    new = Source(name=name, gen_fn=gen_fn, domain=domain, description=description)
    for i, s in enumerate(_REGISTRY):
        if s.name == name:
            warnings.warn(f"Source {name!r} registered twice, replacing the earlier one")
            _REGISTRY[i] = new
            return new
    _REGISTRY.append(new)
    return new


def source(name, domain, description=""):
    """Decorator that registers a generator function."""

    def decorator(fn):
        register(name, fn, domain, description)
        return fn

    return decorator


def get_sources(domain: Optional[str] = None) -> List[Source]:
    """Filter registry.  None = all domains."""
    if domain is None:
        return list(_REGISTRY)
    return [s for s in _REGISTRY if s.domain == domain]


def get_source(name: str) -> Source:
    for s in _REGISTRY:
        if s.name == name:
            return s
    raise KeyError(f"Unknown source: {name!r}")


def seed_adapter(gen_fn):
    """Wrap (rng, size) -> (seed, size)."""

    def adapted(seed, size):
        rng = np.random.default_rng(seed)
        return gen_fn(rng, size)

    return adapted


def _random_offset(rng):
    # Keep clear of the top of the 64-bit range so buffers never wrap.
    return int(rng.integers(0, 2**48))


# ================================================================
# eprng
# ================================================================


@source(
    "eprng bytes",
    domain="eprng",
    description="Zero-bit count of consecutive 64-bit offsets --- values cluster "
    "around 64 minus the popcount of the high bits, never exceed 64",
)
def gen_eprng_bytes(rng, size):
    return eprng.gen_bytes(size, _random_offset(rng))


@source(
    "eprng digits (base 10)",
    domain="eprng",
    description="Zero-bit count reduced mod 10 and written as '0'-'9'",
)
def gen_eprng_digits10(rng, size):
    return eprng.gen_digit_chars(size, _random_offset(rng), radix=10)


@source(
    "eprng digits (base 16)",
    domain="eprng",
    description="Zero-bit count reduced mod 16 and written as '0'-'f'",
)
def gen_eprng_digits16(rng, size):
    return eprng.gen_digit_chars(size, _random_offset(rng), radix=16)


# ================================================================
# Baselines
# ================================================================


@source(
    "White Noise",
    domain="noise",
    description="IID uniform random bytes --- the null model, flat histogram",
)
def gen_white_noise(rng, size):
    return rng.integers(0, 256, size, dtype=np.uint8)


@source(
    "Dice Rolls",
    domain="noise",
    description="Simulated dice rolls --- uniform over just 6 levels (1-6)",
)
def gen_dice(rng, size):
    return rng.integers(1, 7, size=size).astype(np.uint8)


@source(
    "RANDU",
    domain="prng",
    description="IBM's RANDU (1968), x(n+1) = 65539 x(n) mod 2³¹ --- top byte of each "
    "state; a baseline whose byte histogram looks flat despite its lattice structure",
)
def gen_randu(rng, size):
    state = int(rng.integers(0, 2**30)) * 2 + 1  # RANDU needs an odd seed
    vals = np.empty(size, dtype=np.uint8)
    for i in range(size):
        state = (65539 * state) & 0x7FFFFFFF
        vals[i] = state >> 23
    return vals
