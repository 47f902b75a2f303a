import logging
import random
import struct
from enum import Enum

from bytestream_core.settings import (
    RANDOM_WORD_BITS,
    RANDOM_WORD_SIZE,
    SEED_MASK,
    SEED_MAX,
    SEED_MIN,
)
from bytestream_core.stream import PullResult, Stream

logger = logging.getLogger("bytestream")


class GeneratorMode(str, Enum):
    BYTE = "byte"  # one draw per output byte
    WORD = "word"  # one draw per 8 output bytes, little-endian


def normalize_seed(seed: int) -> int:
    """Map a signed or unsigned 64-bit seed onto its unsigned 64-bit form.

    `random.Random` seeds with the absolute value of an int, so `-5` and `5`
    would otherwise produce the same stream.
    """
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an int, got {type(seed).__name__}")
    if seed < SEED_MIN or seed > SEED_MAX:
        raise ValueError(f"seed {seed} does not fit into 64 bits")
    return seed & SEED_MASK


class _RandomByteGenerator(Stream):
    __seed: int
    __mode: GeneratorMode
    __rng: random.Random

    def __init__(self, seed: int, mode: GeneratorMode):
        self.__seed = seed
        self.__mode = GeneratorMode(mode)
        self.__rng = random.Random(normalize_seed(seed))

    @property
    def seed(self) -> int:
        return self.__seed

    @property
    def mode(self) -> GeneratorMode:
        return self.__mode

    def pull(self, buffer: bytearray | memoryview) -> PullResult:
        if self.__mode == GeneratorMode.WORD:
            self.__fill_words(buffer)
        else:
            self.__fill_bytes(buffer)
        return PullResult(len(buffer), False)

    def __fill_bytes(self, buffer: bytearray | memoryview):
        for i in range(len(buffer)):
            buffer[i] = self.__rng.getrandbits(RANDOM_WORD_BITS) & 0xFF

    def __fill_words(self, buffer: bytearray | memoryview):
        size = len(buffer)
        for i in range(0, size, RANDOM_WORD_SIZE):
            word = struct.pack("<Q", self.__rng.getrandbits(RANDOM_WORD_BITS))
            end = min(i + RANDOM_WORD_SIZE, size)
            # the unused tail of the last word is dropped, never carried over
            buffer[i:end] = word[: end - i]


def new_generator(seed: int, mode: GeneratorMode = GeneratorMode.BYTE) -> Stream:
    """Create an infinite pseudo-random byte stream.

    The emitted bytes are a pure function of `seed`, `mode` and the sequence of
    pull sizes. In byte mode the pull sizes do not matter at all.
    """
    generator = _RandomByteGenerator(seed, mode)
    logger.debug(f"new {generator.mode.value} generator with seed {seed}")
    return generator
