import threading

from idgen.alphabet import ALPHABET, BASE, decode_base62, encode_base62, increment_base62, is_base62
from idgen.random_id import DEFAULT_LENGTH, RandomSegmentGenerator
from idgen.sortable import SortableIdGenerator, SortableParts, parse_sortable_id

_random_generator = None
_sortable_generator = None
_default_length = DEFAULT_LENGTH
_defaults_lock = threading.Lock()


def _build(id_config):
    if id_config is None:
        random_generator = RandomSegmentGenerator()
        return random_generator, SortableIdGenerator(random_generator=random_generator), DEFAULT_LENGTH

    random_generator = RandomSegmentGenerator(batch_size=id_config.batch_size)
    sortable_generator = SortableIdGenerator(
        random_generator=random_generator,
        timestamp_width=id_config.timestamp_width,
        random_width=id_config.random_width,
    )
    return random_generator, sortable_generator, id_config.default_length


def configure(id_config=None):
    """Replace the process-default generators, optionally from an IdConfig."""
    global _random_generator, _sortable_generator, _default_length
    random_generator, sortable_generator, default_length = _build(id_config)
    with _defaults_lock:
        _random_generator, _sortable_generator = random_generator, sortable_generator
        _default_length = default_length
    return sortable_generator


def _ensure_defaults():
    global _random_generator, _sortable_generator
    if _sortable_generator is None:
        with _defaults_lock:
            if _sortable_generator is None:
                _random_generator, _sortable_generator, _ = _build(None)


def get_random_generator():
    _ensure_defaults()
    return _random_generator


def get_sortable_generator():
    _ensure_defaults()
    return _sortable_generator


def create_id(length=None):
    """Random base62 string of `length` symbols (configured default: 16)."""
    if length is None:
        length = _default_length
    return get_random_generator().generate(length)


def create_sortable_id():
    """16 char time-sortable id from the process-default generator."""
    return get_sortable_generator().generate()


__all__ = [
    "ALPHABET",
    "BASE",
    "DEFAULT_LENGTH",
    "RandomSegmentGenerator",
    "SortableIdGenerator",
    "SortableParts",
    "configure",
    "create_id",
    "create_sortable_id",
    "decode_base62",
    "encode_base62",
    "get_random_generator",
    "get_sortable_generator",
    "increment_base62",
    "is_base62",
    "parse_sortable_id",
]
