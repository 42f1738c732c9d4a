import pytest

from algoplay.bloom.info import (
    PART_BIT_COUNT,
    BFInfo,
    Location,
    murmur3_sum64,
)


@pytest.mark.parametrize(
    "n, p, m, k",
    [
        (4000, 0.0000001, 134191, 23),
        (100, 0.02, 815, 6),
        (100000000, 0.0001, 1917011676, 13),
    ],
)
def test_estimate_params(n, p, m, k):
    info = BFInfo(n=n, p=p, name="sample")
    info.estimate_params()
    assert info.m == m
    assert info.k == k


@pytest.mark.parametrize(
    "name, m, parts, last_part, last_part_max",
    [
        ("bf1", 1024, 1, "bf1:0", 1024),
        ("bf2", PART_BIT_COUNT * 5 + 1024, 6, "bf2:5", 1024),
    ],
)
def test_calculate_parts(name, m, parts, last_part, last_part_max):
    info = BFInfo(name=name, m=m)
    info.calculate_parts()
    assert len(info.parts) == parts
    assert info.parts[parts - 1].name == last_part
    assert info.parts[parts - 1].max == last_part_max


def test_calculate_parts_full_parts_use_uint32_max():
    info = BFInfo(name="bf", m=PART_BIT_COUNT * 2 + 7)
    info.calculate_parts()
    assert [part.max for part in info.parts] == [2**32 - 1, 2**32 - 1, 7]
    assert [part.index for part in info.parts] == [0, 1, 2]


def test_estimate_params_rejects_zero_n():
    info = BFInfo(n=0, p=0.01)
    with pytest.raises(ValueError):
        info.estimate_params()


def test_estimate_params_rejects_bad_p():
    info = BFInfo(n=10, p=1.5)
    with pytest.raises(ValueError):
        info.estimate_params()


def test_create_fills_everything():
    info = BFInfo.create("users", 100, 0.02)
    assert (info.m, info.k) == (815, 6)
    assert [part.name for part in info.parts] == ["users:0"]
    assert info.parts[0].max == 815


def test_murmur_empty_input_is_zero():
    assert murmur3_sum64(b"", 0) == 0


def test_murmur_known_vector():
    assert murmur3_sum64(b"hello", 0) == 0xCBD8A7B341BD9B02


def test_murmur_seed_changes_result():
    assert murmur3_sum64(b"hello", 1) != murmur3_sum64(b"hello", 0)
    assert murmur3_sum64(b"hello", 1) == murmur3_sum64(b"hello", 1)


@pytest.mark.parametrize("size", [0, 1, 7, 8, 9, 15, 16, 17, 31, 32, 33])
def test_murmur_fits_in_64_bits(size):
    value = murmur3_sum64(bytes(range(size)), 42)
    assert 0 <= value < 2**64


def test_hashes_count_and_range():
    info = BFInfo.create("h", 1000, 0.01)
    hashes = info.hashes(b"key")
    assert len(hashes) == info.k
    assert all(0 <= h < info.m for h in hashes)


def test_hashes_deterministic():
    info = BFInfo.create("h", 1000, 0.01)
    first = info.hashes(b"abc")
    assert len(first) == 7
    assert all(0 <= h < 9586 for h in first)
    assert BFInfo.create("other", 1000, 0.01).hashes(b"abc") == first
    assert [loc.offset for loc in info.locations(b"abc")] == first


def test_hashes_without_size_raise():
    info = BFInfo(k=3, m=0)
    with pytest.raises(ValueError):
        info.hashes(b"abc")


def test_locations_match_hashes():
    info = BFInfo.create("loc", 1000, 0.01)
    hashes = info.hashes(b"value")
    locations = info.locations(b"value")
    assert locations == [
        Location(name="loc:0", offset=h % (PART_BIT_COUNT - 1), index=0)
        for h in hashes
    ]