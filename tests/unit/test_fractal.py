"""
Unit tests for the fractal combinators.
"""
import dataclasses
import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from pyfastnoise import InvalidParameter
from pyfastnoise.noise import (
    BILLOW,
    FBM,
    RIDGED,
    base_noise,
    billow,
    build_config,
    fbm,
    get_transform,
    noise_fn,
    octave_amplitudes,
    ridged,
    sample,
    sample1,
    sample2,
    sample3,
    single,
)
from pyfastnoise.noise import kernels as kn

COMBINATORS = [(fbm, FBM), (billow, BILLOW), (ridged, RIDGED)]


def _reference_billow_1d(cfg, x):
    """Billow octave loop written out step by step for the 1D value kernel."""
    xx = x * cfg.frequency
    total = abs(kn.value1(cfg.perm[0], xx, kn.hermite)) * 2.0 - 1.0
    amp = 1.0
    for i in range(1, cfg.octaves):
        xx *= cfg.lacunarity
        amp *= cfg.gain
        total += (abs(kn.value1(cfg.perm[i], xx, kn.hermite)) * 2.0 - 1.0) * amp
    return total * cfg.fractal_bounding


class TestTransforms:
    """Test per-octave transforms."""

    @pytest.mark.unit
    def test_billow_fold(self):
        assert BILLOW.transform(0.0) == -1.0
        assert BILLOW.transform(1.0) == 1.0
        assert BILLOW.transform(-0.25) == -0.5

    @pytest.mark.unit
    def test_fbm_identity(self):
        assert FBM.transform(-0.3) == -0.3
        assert FBM.weight(0.25, -1.0) == 0.25

    @pytest.mark.unit
    def test_ridged_transform_and_weight(self):
        assert RIDGED.transform(0.0) == 1.0
        assert RIDGED.transform(-1.0) == 0.0
        assert RIDGED.weight(0.5, 0.5) == 0.25
        assert RIDGED.weight(0.5, 2.0) == 0.5
        assert RIDGED.weight(0.5, -1.0) == 0.0

    @pytest.mark.unit
    def test_get_transform(self):
        assert get_transform("fbm") is FBM
        assert get_transform("billow") is BILLOW
        assert get_transform("ridged") is RIDGED

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["none", "turbulence", ""])
    def test_get_transform_unknown(self, name):
        with pytest.raises(InvalidParameter):
            get_transform(name)


class TestReferenceScenario:
    """Regression scenario: seed 42, 4 octaves, lacunarity 2, gain 0.5."""

    @pytest.mark.unit
    def test_matches_explicit_octave_loop(self, reference_config):
        expected = _reference_billow_1d(reference_config, 0.37)
        assert sample1(reference_config, 0.37) == expected

    @pytest.mark.unit
    def test_reproducible_across_builds(self, reference_config):
        fresh = build_config(
            seed=42, octaves=4, lacunarity=2.0, gain=0.5, frequency=1.0,
            normalize=False, table_size=256,
        )
        assert sample1(fresh, 0.37) == sample1(reference_config, 0.37)

    @pytest.mark.unit
    def test_reference_is_bounded(self, reference_config):
        assert -1.0 <= sample1(reference_config, 0.37) <= 1.0

    @pytest.mark.unit
    def test_pinned_value(self, reference_config):
        assert sample1(reference_config, 0.37) == -0.4779552666666665


class TestCoordinateOverflow:
    """Octaves whose scaled coordinates leave the representable range are dropped."""

    @pytest.mark.unit
    @pytest.mark.parametrize("fractal", ["fbm", "billow", "ridged", "none"])
    def test_huge_finite_coordinate(self, fractal, noise_type):
        cfg = build_config(42, octaves=2, noise_type=noise_type, fractal=fractal)
        for coords in [(1e308,), (-1e308, 2.0), (1.0, 1e308, -1e308)]:
            v = sample(cfg, *coords)
            assert math.isfinite(v)
            assert 0.0 <= v <= 1.0

    @pytest.mark.unit
    def test_huge_coordinate_contributes_nothing(self):
        cfg = build_config(42, octaves=2)
        assert sample1(cfg, 1e308) == 0.5

    @pytest.mark.unit
    @pytest.mark.parametrize("fractal", ["fbm", "billow", "ridged"])
    def test_many_octaves_ordinary_coordinate(self, fractal):
        cfg = build_config(42, octaves=1100, table_size=8, fractal=fractal)
        for x in (1.0, -0.37, 12.5):
            v = sample1(cfg, x)
            assert math.isfinite(v)
            assert 0.0 <= v <= 1.0

    @pytest.mark.unit
    def test_later_octaves_dropped(self):
        cfg = build_config(3, octaves=3, normalize=False, fractal="fbm")
        x = 6e299
        expected = base_noise(cfg, cfg.perm[0], x) * cfg.fractal_bounding
        assert fbm(cfg, x) == expected

    @pytest.mark.unit
    def test_shrinking_lacunarity_skips_leading_octaves(self):
        cfg = build_config(3, octaves=3, lacunarity=0.5, gain=0.5, normalize=False,
                           fractal="fbm")
        x = 3.2e300
        expected = base_noise(cfg, cfg.perm[2], x * 0.5 * 0.5) * 0.25 * cfg.fractal_bounding
        assert fbm(cfg, x) == expected

    @pytest.mark.unit
    def test_single_out_of_range(self):
        cfg = build_config(1, fractal="none", frequency=10.0, normalize=False)
        assert single(cfg, 1e300) == 0.0
        assert single(cfg, 1e298) == base_noise(cfg, cfg.perm[0], 1e298 * 10.0)


class TestSingleOctave:
    """A single octave applies no lacunarity or gain."""

    @pytest.mark.unit
    @pytest.mark.parametrize("combinator, transform", COMBINATORS)
    def test_equals_transformed_base_noise(self, combinator, transform, noise_type):
        cfg = build_config(8, octaves=1, lacunarity=3.0, gain=0.3, frequency=1.7,
                           normalize=False, noise_type=noise_type)
        for coords in [(0.37,), (1.25, -2.5), (3.3, 0.1, -7.9)]:
            scaled = tuple(c * 1.7 for c in coords)
            expected = transform.transform(base_noise(cfg, cfg.perm[0], *scaled))
            assert combinator(cfg, *coords) == expected

    @pytest.mark.unit
    def test_normalized_single_octave(self):
        cfg = build_config(8, octaves=1, normalize=True)
        raw = dataclasses.replace(cfg, normalize=False)
        assert billow(cfg, 0.6) == (billow(raw, 0.6) + 1.0) * 0.5


class TestAccumulation:
    """Octave recursion details shared by all combinators."""

    @pytest.mark.unit
    def test_two_octave_fbm(self):
        cfg = build_config(5, octaves=2, lacunarity=2.5, gain=0.4, frequency=0.5,
                           normalize=False, noise_type="gradient")
        x, y = 3.1, -1.7
        v0 = base_noise(cfg, cfg.perm[0], x * 0.5, y * 0.5)
        v1 = base_noise(cfg, cfg.perm[1], x * 0.5 * 2.5, y * 0.5 * 2.5)
        expected = (v0 + v1 * 0.4) * cfg.fractal_bounding
        assert fbm(cfg, x, y) == expected

    @pytest.mark.unit
    def test_two_octave_ridged_weighting(self):
        cfg = build_config(5, octaves=2, gain=0.5, normalize=False)
        x = 0.81
        s0 = 1.0 - abs(base_noise(cfg, cfg.perm[0], x))
        s1 = 1.0 - abs(base_noise(cfg, cfg.perm[1], x * 2.0))
        expected = (s0 + s1 * (0.5 * min(max(s0, 0.0), 1.0))) * cfg.fractal_bounding
        assert ridged(cfg, x) == expected

    @pytest.mark.unit
    def test_octave_amplitudes_decay(self):
        cfg = build_config(1, octaves=8, gain=0.6, table_size=16)
        amps = octave_amplitudes(cfg)
        assert len(amps) == 8
        assert amps[0] == 1.0
        assert all(b < a for a, b in zip(amps, amps[1:]))
        for i, amp in enumerate(amps):
            assert amp == pytest.approx(0.6 ** i)

    @pytest.mark.unit
    def test_octaves_use_their_own_tables(self):
        cfg = build_config(13, octaves=3, normalize=False)
        swapped = dataclasses.replace(cfg, perm=(cfg.perm[1], cfg.perm[0], cfg.perm[2]))
        points = np.linspace(-4.0, 4.0, 41)
        assert any(billow(cfg, float(x)) != billow(swapped, float(x)) for x in points)


class TestDispatch:
    """sample() and the fixed-arity entry points."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name, combinator", [("fbm", fbm), ("billow", billow),
                                                  ("ridged", ridged), ("none", single)])
    def test_sample_uses_configured_fractal(self, name, combinator):
        cfg = build_config(21, octaves=3, fractal=name)
        assert sample(cfg, 1.5) == combinator(cfg, 1.5)
        assert sample(cfg, 1.5, 2.5) == combinator(cfg, 1.5, 2.5)
        assert sample(cfg, 1.5, 2.5, 3.5) == combinator(cfg, 1.5, 2.5, 3.5)

    @pytest.mark.unit
    def test_fixed_arity(self, reference_config):
        assert sample1(reference_config, 0.2) == sample(reference_config, 0.2)
        assert sample2(reference_config, 0.2, 0.4) == sample(reference_config, 0.2, 0.4)
        assert sample3(reference_config, 0.2, 0.4, 0.6) == sample(reference_config, 0.2, 0.4, 0.6)

    @pytest.mark.unit
    def test_noise_fn(self, reference_config):
        f = noise_fn(reference_config)
        assert f(0.2, 0.4) == sample2(reference_config, 0.2, 0.4)

    @pytest.mark.unit
    @pytest.mark.parametrize("coords", [(), (1.0, 2.0, 3.0, 4.0)])
    def test_bad_arity(self, reference_config, coords):
        with pytest.raises(InvalidParameter):
            sample(reference_config, *coords)

    @pytest.mark.unit
    def test_single_ignores_octaves(self):
        cfg = build_config(4, octaves=5, frequency=2.0, normalize=False)
        assert single(cfg, 0.3, 0.9) == base_noise(cfg, cfg.perm[0], 0.3 * 2.0, 0.9 * 2.0)


class TestProperties:
    """Determinism, boundedness and continuity of fractal output."""

    @pytest.mark.unit
    def test_deterministic(self, sample_points, noise_type):
        cfg = build_config(77, octaves=5, noise_type=noise_type)
        for p in sample_points[:50]:
            assert sample3(cfg, *p) == sample3(cfg, *p)
            assert sample2(cfg, p[0], p[1]) == sample2(cfg, p[0], p[1])

    @pytest.mark.unit
    def test_seed_changes_output(self, sample_points):
        a = build_config(1, octaves=3)
        b = build_config(2, octaves=3)
        assert any(sample2(a, p[0], p[1]) != sample2(b, p[0], p[1]) for p in sample_points[:20])

    @pytest.mark.unit
    @pytest.mark.slow
    @pytest.mark.parametrize("octaves", range(1, 9))
    def test_normalized_billow_bounded_10k_points(self, octaves):
        cfg = build_config(42, octaves=octaves, normalize=True)
        xs = np.random.RandomState(octaves).uniform(-1000.0, 1000.0, size=10000)
        for x in xs:
            v = sample1(cfg, float(x))
            assert 0.0 <= v <= 1.0

    @pytest.mark.unit
    @pytest.mark.slow
    @pytest.mark.parametrize("fractal", ["fbm", "billow", "ridged", "none"])
    def test_normalized_bounded_all_kernels(self, fractal, noise_type, sample_points):
        for octaves in range(1, 9):
            cfg = build_config(3, octaves=octaves, gain=0.7, lacunarity=1.9,
                               noise_type=noise_type, fractal=fractal)
            for p in sample_points[:60]:
                assert 0.0 <= sample2(cfg, p[0], p[1]) <= 1.0
                assert 0.0 <= sample3(cfg, *p) <= 1.0

    @pytest.mark.unit
    @pytest.mark.parametrize("fractal", ["fbm", "billow"])
    def test_raw_output_bounded(self, fractal, noise_type, sample_points):
        cfg = build_config(3, octaves=6, normalize=False, noise_type=noise_type, fractal=fractal)
        for p in sample_points:
            assert -1.0 <= sample2(cfg, p[0], p[1]) <= 1.0

    @pytest.mark.unit
    def test_ridged_normalized_upper_half(self, sample_points):
        cfg = build_config(3, octaves=6, fractal="ridged")
        for p in sample_points:
            assert 0.5 <= sample2(cfg, p[0], p[1]) <= 1.0

    @pytest.mark.unit
    def test_continuity(self, sample_points, noise_type):
        cfg = build_config(19, octaves=4, noise_type=noise_type)
        eps = 1e-6
        for p in sample_points:
            x, y, z = (float(c) for c in p)
            assert abs(sample1(cfg, x + eps) - sample1(cfg, x)) < 1e-3
            assert abs(sample2(cfg, x + eps, y) - sample2(cfg, x, y)) < 1e-3
            assert abs(sample3(cfg, x, y, z + eps) - sample3(cfg, x, y, z)) < 1e-3

    @pytest.mark.unit
    def test_large_coordinates(self):
        cfg = build_config(6, octaves=4)
        for c in (1e9, -1e9, 4.5e7):
            assert 0.0 <= sample2(cfg, c, -c) <= 1.0

    @pytest.mark.unit
    def test_concurrent_readers(self, sample_points):
        cfg = build_config(31, octaves=5, noise_type="simplex")
        points = [tuple(float(c) for c in p) for p in sample_points]
        sequential = [sample3(cfg, *p) for p in points]
        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(lambda p: sample3(cfg, *p), points))
        assert parallel == sequential
