import numpy as np
import pytest

from fracnoise.core import hash_u32
from fracnoise.grid import Grid2D
from fracnoise.octaves import OctaveCollection


def test_octave_dimension_law():
    coll = OctaveCollection.fractal_noise(5, seed=4)
    assert coll.n_octaves == 5
    for i, octave in enumerate(coll):
        assert octave.nx == 2**i + 1
        assert octave.ny == 2**i + 1
    assert coll.max_dim == 16
    assert coll.output_side == 17


def test_octaves_are_seeded_from_hashed_seed():
    coll = OctaveCollection.fractal_noise(3, seed=4)
    base = hash_u32(4)
    for i, octave in enumerate(coll):
        side = 2**i + 1
        assert octave == Grid2D.white_noise(side, side, base + i)


def test_fractal_noise_is_deterministic():
    a = OctaveCollection.fractal_noise(4, seed=11).create_fractal_map(0.5, 0.5)
    b = OctaveCollection.fractal_noise(4, seed=11).create_fractal_map(0.5, 0.5)
    assert a == b


def test_zero_octaves_gives_empty_collection():
    coll = OctaveCollection.fractal_noise(0, seed=4)
    assert len(coll) == 0
    with pytest.raises(ValueError):
        _ = coll.max_dim
    with pytest.raises(ValueError):
        coll.sample(0, 0)
    with pytest.raises(ValueError):
        coll.create_fractal_map(0.5, 0.5)


def test_negative_octaves_rejected():
    with pytest.raises(ValueError):
        OctaveCollection.fractal_noise(-1, seed=4)


def test_rejects_octaves_with_wrong_sides():
    with pytest.raises(ValueError):
        OctaveCollection([Grid2D.zeros(2, 2), Grid2D.zeros(2, 2)])


def test_sample_at_origin_returns_octave_corners():
    coll = OctaveCollection.fractal_noise(2, seed=4)
    assert [o.nx for o in coll] == [2, 3]
    out = coll.sample(0, 0)
    assert out.shape == (2,)
    assert out[0] == coll[0].get(0, 0)
    assert out[1] == coll[1].get(0, 0)


def test_sample_at_upper_corner_uses_last_cell():
    coll = OctaveCollection.fractal_noise(2, seed=4)
    out = coll.sample(2, 2)
    assert out[0] == coll[0].get(1, 1)
    assert out[1] == coll[1].get(2, 2)


def test_sample_blends_coarse_octave_between_corners():
    coll = OctaveCollection.fractal_noise(2, seed=4)
    out = coll.sample(1, 0)
    expected = 0.5 * coll[0].get(0, 0) + 0.5 * coll[0].get(1, 0)
    assert np.isclose(out[0], expected)
    assert out[1] == coll[1].get(1, 0)


def test_single_octave_collection():
    coll = OctaveCollection.fractal_noise(1, seed=3)
    assert coll.max_dim == 1
    fmap = coll.create_fractal_map(1.0, 0.5)
    assert (fmap.nx, fmap.ny) == (2, 2)
    assert np.array_equal(fmap.data, coll[0].data)


@pytest.mark.parametrize("i,j", [(-1, 0), (0, -1), (9, 0), (0, 9)])
def test_sample_outside_domain_raises(i, j):
    coll = OctaveCollection.fractal_noise(4, seed=4)
    with pytest.raises(IndexError):
        coll.sample(i, j)


def test_sample_many_matches_sample():
    coll = OctaveCollection.fractal_noise(4, seed=21)
    ii = np.array([[0, 3, 8], [5, 7, 1]])
    jj = np.array([[0, 2, 8], [6, 1, 4]])
    out = coll.sample_many(ii, jj)
    assert out.shape == (4, 2, 3)
    for r in range(2):
        for c in range(3):
            assert np.array_equal(out[:, r, c], coll.sample(ii[r, c], jj[r, c]))


def test_sample_many_rejects_float_coordinates():
    coll = OctaveCollection.fractal_noise(3, seed=4)
    with pytest.raises(ValueError):
        coll.sample_many(np.array([0.5]), np.array([1.0]))


def test_fractal_map_size():
    for n in [1, 2, 3, 6]:
        fmap = OctaveCollection.fractal_noise(n, seed=4).create_fractal_map(0.5, 0.5)
        side = 2 ** (n - 1) + 1
        assert (fmap.nx, fmap.ny) == (side, side)


def test_fractal_map_matches_per_point_fold():
    coll = OctaveCollection.fractal_noise(3, seed=8)
    fmap = coll.create_fractal_map(0.5, 0.5)
    for j in range(coll.output_side):
        for i in range(coll.output_side):
            assert fmap.get(i, j) == coll.fractal_value(i, j, 0.5, 0.5)


def test_persistence_zero_keeps_only_coarsest_octave():
    coll = OctaveCollection.fractal_noise(4, seed=2)
    base = 0.7
    fmap = coll.create_fractal_map(base, 0.0)
    for j in range(coll.output_side):
        for i in range(coll.output_side):
            comp0 = coll.sample(i, j)[0]
            assert fmap.get(i, j) == float(np.float32(base) * comp0)


def test_fractal_map_is_not_renormalized():
    coll = OctaveCollection.fractal_noise(3, seed=5)
    small = coll.create_fractal_map(0.5, 0.5)
    large = coll.create_fractal_map(2.0, 0.5)
    assert np.allclose(large.data, 4.0 * small.data)


@pytest.mark.parametrize(
    "base,persi", [(float("nan"), 0.5), (0.5, float("inf")), (float("-inf"), 0.5)]
)
def test_non_finite_weights_rejected(base, persi):
    coll = OctaveCollection.fractal_noise(2, seed=4)
    with pytest.raises(ValueError):
        coll.create_fractal_map(base, persi)
