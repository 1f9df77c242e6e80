import random
import re

from gkewizard.naming import generate_cluster_name


def test_generated_names_are_valid_cluster_names():
    rng = random.Random(42)
    for _ in range(50):
        assert re.match(r"^[a-z]+$", generate_cluster_name(rng))


def test_generated_names_are_reproducible_with_seed():
    assert generate_cluster_name(random.Random(7)) == generate_cluster_name(
        random.Random(7)
    )
