"""
Tests for the drug selection stage.
"""

import numpy as np
from models.individual import DRUG_RESISTANCE_TAG, Individual, Lineage
from models.selection import drug_selection
from conftest import make_host, wildtype, resistant


class TestDrugSelection:
    """Test drug selection semantics."""

    def test_no_resistant_individuals_skips(self, make_context):
        """Hosts without the resistance tag are never treated."""
        hosts = [make_host(0, [wildtype() for _ in range(50)])]

        result = drug_selection(hosts, make_context(drug_pressure=1.0))

        assert result[0] is hosts[0]

    def test_zero_pressure_skips(self, make_context):
        """With no drug pressure nothing dies."""
        hosts = [make_host(0, [resistant()] + [wildtype() for _ in range(10)])]

        result = drug_selection(hosts, make_context(drug_pressure=0.0))

        assert result[0] is hosts[0]

    def test_selection_uses_tag_not_lineage(self, make_context):
        """A wild-type labelled carrier of the tag triggers and survives treatment."""
        carrier = Individual(lineage=Lineage.WILDTYPE, mutations=frozenset({DRUG_RESISTANCE_TAG}))
        labelled_only = Individual(lineage=Lineage.RESISTANT)
        hosts = [make_host(0, [carrier] * 30 + [labelled_only] * 30)]

        result = drug_selection(hosts, make_context(drug_pressure=1.0))
        survivors = result[0].population

        carriers = sum(1 for ind in survivors if ind.is_drug_resistant)
        others = len(survivors) - carriers
        assert carriers > others

    def test_survivor_order_preserved(self, make_context):
        """Survivors keep their relative order."""
        population = [
            Individual(lineage=Lineage.RESISTANT, fitness=0.9,
                       mutations=frozenset({DRUG_RESISTANCE_TAG, f"id{i}"}))
            for i in range(50)
        ]
        hosts = [make_host(0, population)]

        result = drug_selection(hosts, make_context(drug_pressure=1.0))
        ids = [int(next(t for t in ind.mutations if t.startswith("id"))[2:]) for ind in result[0].population]

        assert ids == sorted(ids)

    def test_extinction_guard(self, make_context):
        """If nobody survives the pre-selection population is kept."""
        class AlwaysHigh:
            def random(self):
                return 0.99

        ctx = make_context(drug_pressure=1.0)
        ctx.rng = AlwaysHigh()
        hosts = [make_host(0, [resistant(), wildtype()])]

        result = drug_selection(hosts, ctx)

        assert result[0].population == hosts[0].population

    def test_survival_fractions(self, make_context):
        """Resistant individuals survive about 90% of the time, others about 5%."""
        ctx = make_context(drug_pressure=1.0)
        population = [resistant() for _ in range(10)] + [wildtype() for _ in range(10)]
        hosts = [make_host(0, population)]

        resistant_fractions = []
        wildtype_fractions = []
        for _ in range(1000):
            survivors = drug_selection(hosts, ctx)[0].population
            kept_resistant = sum(1 for ind in survivors if ind.is_drug_resistant)
            resistant_fractions.append(kept_resistant / 10)
            wildtype_fractions.append((len(survivors) - kept_resistant) / 10)

        assert 0.85 <= np.mean(resistant_fractions) <= 0.95
        assert 0.02 <= np.mean(wildtype_fractions) <= 0.08

    def test_independent_hosts(self, make_context):
        """Hosts without resistant individuals are untouched while others are treated."""
        treated = make_host(0, [resistant() for _ in range(10)] + [wildtype() for _ in range(40)])
        untouched = make_host(1, [wildtype() for _ in range(40)])

        result = drug_selection([treated, untouched], make_context(drug_pressure=1.0))

        assert result[0].size < 50
        assert result[1] is untouched
