"""
Tests for the drift stage.
"""

import numpy as np
import pytest
from models.drift import drift_pool_size, drift_sampling, roulette_indices
from models.individual import Individual, Lineage
from conftest import make_host, wildtype


class TestDriftPoolSize:
    """Test the intermediate pool size formula."""

    @pytest.mark.parametrize("size, strength, expected", [
        (100, 0.0, 100),
        (10, 0.5, 9),
        (100, 1.0, 90),
        (1, 1.0, 1),
        (3, 1.0, 2),
    ])
    def test_pool_size(self, size, strength, expected):
        """The first term wins whenever it is larger than half the population."""
        assert drift_pool_size(size, strength) == expected

    def test_pool_size_never_below_half(self):
        """The pool always holds at least half the population and at least one."""
        for size in range(1, 200):
            for strength in (0.0, 0.5, 1.0):
                assert drift_pool_size(size, strength) >= max(1, size // 2)


class TestRouletteIndices:
    """Test fitness-proportional index draws."""

    def test_zero_weight_never_drawn(self, rng):
        """Indices with zero weight are never selected while others have weight."""
        weights = np.array([0.0, 1.0, 0.0, 1.0])

        indices = roulette_indices(weights, 500, rng)

        assert set(indices.tolist()) <= {1, 3}

    def test_proportional_draws(self, rng):
        """Draw frequencies follow the weights."""
        weights = np.array([0.1, 0.9])

        indices = roulette_indices(weights, 20000, rng)

        assert np.mean(indices == 1) == pytest.approx(0.9, abs=0.02)

    def test_non_positive_total_falls_back_to_uniform(self, rng):
        """All-zero weights still produce valid uniform draws."""
        weights = np.zeros(4)

        indices = roulette_indices(weights, 1000, rng)

        assert len(indices) == 1000
        assert set(indices.tolist()) == {0, 1, 2, 3}


class TestDriftSampling:
    """Test the drift stage."""

    def test_population_size_preserved(self, make_context):
        """Every host ends with exactly its incoming size."""
        hosts = [make_host(0, [wildtype() for _ in range(37)]), make_host(1, [wildtype()])]

        result = drift_sampling(hosts, make_context(drift_strength=0.5))

        assert [host.size for host in result] == [37, 1]

    def test_empty_host_untouched(self, make_context):
        """Empty hosts pass straight through."""
        hosts = [make_host(0, [])]

        result = drift_sampling(hosts, make_context())

        assert result[0] is hosts[0]

    def test_only_existing_genotypes_survive(self, make_context):
        """Drift only resamples; it never invents genotypes."""
        population = [
            Individual(lineage=Lineage.MUTANT, fitness=0.5 + i * 0.01, mutations=frozenset({f"m{i}"}))
            for i in range(20)
        ]
        hosts = [make_host(0, population)]

        result = drift_sampling(hosts, make_context())

        assert set(result[0].population) <= set(population)

    def test_fitter_genotype_is_favoured(self, make_context):
        """Fitness weighting pushes the fitter genotype up over many resamples."""
        weak = Individual(lineage=Lineage.MUTANT, fitness=0.1, mutations=frozenset({"weak"}))
        strong = wildtype()
        hosts = [make_host(0, [weak] * 100 + [strong] * 100)]
        ctx = make_context()

        strong_share = []
        for _ in range(50):
            population = drift_sampling(hosts, ctx)[0].population
            strong_share.append(sum(1 for ind in population if ind == strong) / len(population))

        assert np.mean(strong_share) > 0.8

    def test_clones_not_shared(self, make_context):
        """Resampled individuals are new objects."""
        ind = wildtype()
        hosts = [make_host(0, [ind])]

        result = drift_sampling(hosts, make_context())

        assert result[0].population[0] == ind
        assert result[0].population[0] is not ind
