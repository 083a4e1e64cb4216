"""HoloPass -- password generation utilities.

Core functions for building a character pool, generating a random password
that covers every selected character category, and estimating a coarse
strength label from entropy.
"""

import logging
import math
import secrets
import string
from dataclasses import dataclass

logger = logging.getLogger(__name__)


# ── Alphabets ──────────────────────────────────────────────────────────────

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{};:,.?/~`|<>"

CATEGORIES = (
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
    ("digits", DIGITS),
    ("symbols", SYMBOLS),
)

# Characters that are easy to confuse in many fonts
AMBIGUOUS = frozenset("Il1O0B8S5Z2")

MIN_LENGTH = 4
MAX_LENGTH = 128
DEFAULT_LENGTH = 16

LABELS = ["Very Weak", "Weak", "Fair", "Strong", "Excellent"]


# ── Errors ─────────────────────────────────────────────────────────────────


class HoloPassError(Exception):
    """Base class for errors raised by :mod:`holopass`."""


class InfeasibleConfigurationError(HoloPassError, ValueError):
    """Raised when ``forbid_repeats`` asks for more characters than the pool has."""

    def __init__(self, length: int, pool_size: int):
        self.length = length
        self.pool_size = pool_size
        super().__init__(
            f"Cannot generate {length} unique characters from a pool of "
            f"{pool_size}; shorten the password or allow repeats"
        )


class RandomSourceUnavailableError(HoloPassError, RuntimeError):
    """Raised when the random source cannot supply numbers."""


# ── Options ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GenerationOptions:
    length: int = DEFAULT_LENGTH
    lowercase: bool = True
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True
    exclude_ambiguous: bool = True
    forbid_repeats: bool = False

    @property
    def effective_length(self) -> int:
        """Requested length clamped to ``[MIN_LENGTH, MAX_LENGTH]``."""
        return max(MIN_LENGTH, min(MAX_LENGTH, self.length))

    def enabled_categories(self):
        """Yield ``(name, alphabet)`` for every enabled category, in order."""
        for name, alphabet in CATEGORIES:
            if getattr(self, name):
                yield name, alphabet


DEFAULT_OPTIONS = GenerationOptions()


# ── Character pool ─────────────────────────────────────────────────────────


def filter_ambiguous(alphabet: str, exclude: bool = True) -> str:
    """Return *alphabet* without ambiguous characters when *exclude* is set."""
    if not exclude:
        return alphabet
    return "".join(c for c in alphabet if c not in AMBIGUOUS)


def build_pool(options: GenerationOptions = DEFAULT_OPTIONS) -> str:
    """Return every character eligible for the random fill.

    Enabled alphabets are concatenated in category order. The result is
    empty when no category is enabled.
    """
    pool = "".join(alphabet for _, alphabet in options.enabled_categories())
    return filter_ambiguous(pool, options.exclude_ambiguous)


def has_enabled_category(options: GenerationOptions) -> bool:
    """Return True when at least one character category is enabled."""
    return any(True for _ in options.enabled_categories())


# ── Password generation ────────────────────────────────────────────────────

_sysrand = secrets.SystemRandom()


def _randbelow(rng, n: int) -> int:
    try:
        return rng.randrange(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailableError(str(exc) or "random source failed") from exc


def seed_categories(options: GenerationOptions, rng=None) -> list[str]:
    """Draw one character from each enabled, non-empty filtered category."""
    rng = rng or _sysrand
    seeds = []
    for name, alphabet in options.enabled_categories():
        usable = filter_ambiguous(alphabet, options.exclude_ambiguous)
        if not usable:
            logger.debug("Category %s is empty after filtering; no seed", name)
            continue
        seeds.append(usable[_randbelow(rng, len(usable))])
    return seeds


def shuffle(chars: list[str], rng=None) -> None:
    """Fisher-Yates shuffle of *chars* in place."""
    rng = rng or _sysrand
    for i in range(len(chars) - 1, 0, -1):
        j = _randbelow(rng, i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def generate_password(options: GenerationOptions = DEFAULT_OPTIONS, *, rng=None) -> str:
    """Generate a random password for *options*.

    Guarantees at least one character from each usable enabled category.
    *rng* may be any :class:`random.Random` instance; a
    :class:`secrets.SystemRandom` is used when omitted.

    Returns an empty string when no category is enabled. Raises
    :class:`InfeasibleConfigurationError` when ``forbid_repeats`` is set and
    the pool is smaller than the requested length.
    """
    rng = rng or _sysrand
    pool = build_pool(options)
    if not pool:
        logger.debug("No category enabled; returning empty password")
        return ""

    length = options.effective_length
    if options.forbid_repeats and len(set(pool)) < length:
        raise InfeasibleConfigurationError(length, len(set(pool)))

    chars = seed_categories(options, rng)
    logger.debug("Pool size %d, seeded %d categories", len(pool), len(chars))

    if options.forbid_repeats:
        # Uniform over unused characters, same as rejecting repeats
        unused = [c for c in dict.fromkeys(pool) if c not in chars]
        while len(chars) < length:
            chars.append(unused.pop(_randbelow(rng, len(unused))))
    else:
        while len(chars) < length:
            chars.append(pool[_randbelow(rng, len(pool))])

    shuffle(chars, rng)
    return "".join(chars)


# ── Strength estimation ────────────────────────────────────────────────────


def entropy_bits(length: int, pool_size: int) -> float:
    """Return ``log2(pool_size) * length``, treating an empty pool as size 1."""
    return math.log2(max(pool_size, 1)) * length


def estimate_strength(password: str, options: GenerationOptions = DEFAULT_OPTIONS) -> dict:
    """Estimate the strength of a password produced with *options*.

    Returns a dict with keys:
        score     -- int 0-4  (0 only for an empty password)
        label     -- str
        bits      -- float, entropy estimate
        length    -- int
        pool_size -- int
    """
    pool_size = len(build_pool(options))

    if not password:
        return {
            "score": 0,
            "label": LABELS[0],
            "bits": 0.0,
            "length": 0,
            "pool_size": pool_size,
        }

    bits = entropy_bits(len(password), pool_size)
    if bits < 40:
        score = 1
    elif bits < 60:
        score = 2
    elif bits < 80:
        score = 3
    else:
        score = 4

    return {
        "score": score,
        "label": LABELS[score],
        "bits": bits,
        "length": len(password),
        "pool_size": pool_size,
    }
