import random
import re

from uimarkup.ids import IdGenerator, sequential_ids


def test_random_ids_format():
    generator = IdGenerator()

    first, second = generator(), generator()

    assert re.fullmatch(r"node-1-[a-z0-9]{9}", first)
    assert re.fullmatch(r"node-2-[a-z0-9]{9}", second)
    assert generator.issued == 2


def test_seeded_generator_is_reproducible():
    one = IdGenerator(rng=random.Random(7))
    two = IdGenerator(rng=random.Random(7))

    assert [one() for _ in range(3)] == [two() for _ in range(3)]


def test_sequential_ids():
    generator = IdGenerator("el", random_suffix=False)

    assert [generator() for _ in range(3)] == ["el-1", "el-2", "el-3"]


def test_sequential_factory_returns_fresh_generators():
    factory = sequential_ids("n")

    first = factory()
    first()
    second = factory()

    assert second() == "n-1"
