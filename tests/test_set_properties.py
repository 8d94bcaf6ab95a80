import random
from ordset import OrderedSet
import pytest

SEEDS = range(25)


def random_values(rng: random.Random, max_len: int = 25):
    return [rng.randrange(0, 30) for _ in range(rng.randrange(0, max_len))]


def is_canonical(values):
    return all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("seed", SEEDS)
def test_construction_is_sorted_and_unique(seed):
    rng = random.Random(seed)
    values = random_values(rng)
    s = OrderedSet(values)
    assert is_canonical(s.to_list())
    assert s.to_list() == sorted(set(values))


@pytest.mark.parametrize("seed", SEEDS)
def test_construction_ignores_input_order(seed):
    rng = random.Random(seed)
    values = random_values(rng)
    shuffled = values[:]
    rng.shuffle(shuffled)
    assert OrderedSet(values) == OrderedSet(shuffled)


@pytest.mark.parametrize("seed", SEEDS)
def test_put_and_delete(seed):
    rng = random.Random(seed)
    s = OrderedSet(random_values(rng))
    x = rng.randrange(0, 30)
    assert s.put(x).put(x) == s.put(x)
    assert x in s.put(x)
    assert x not in s.delete(x)
    assert is_canonical(s.put(x).to_list())
    if x not in s:
        assert s.delete(x) == s


@pytest.mark.parametrize("seed", SEEDS)
def test_binary_operations_match_builtin_sets(seed):
    rng = random.Random(seed)
    xs, ys = random_values(rng), random_values(rng)
    a, b = OrderedSet(xs), OrderedSet(ys)
    sa, sb = set(xs), set(ys)

    assert a.union(b).to_list() == sorted(sa | sb)
    assert a.intersection(b).to_list() == sorted(sa & sb)
    assert a.difference(b).to_list() == sorted(sa - sb)
    assert b.difference(a).to_list() == sorted(sb - sa)
    assert a.symmetric_difference(b).to_list() == sorted(sa ^ sb)
    assert a.disjoint(b) == sa.isdisjoint(sb)
    assert a.subset(b) == sa.issubset(sb)
    assert len(a | b) == len(a) + len(b) - len(a & b)


@pytest.mark.parametrize("seed", SEEDS)
def test_subset_of_own_union(seed):
    rng = random.Random(seed)
    a, b = OrderedSet(random_values(rng)), OrderedSet(random_values(rng))
    assert a.subset(a | b)
    assert (a & b).subset(a)
    assert (a - b).disjoint(b)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize(
    "predicate", [lambda x: x % 2 == 0, lambda x: x > 15, lambda x: False, lambda x: True]
)
def test_filter_and_reject_partition(seed, predicate):
    rng = random.Random(seed)
    s = OrderedSet(random_values(rng))
    kept, rejected = s.filter(predicate), s.reject(predicate)
    assert kept.union(rejected) == s
    assert kept.intersection(rejected) == OrderedSet.empty()
