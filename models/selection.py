"""
Drug selection stage.

Selection only fires in hosts where at least one individual carries the
resistance tag. Resistance is read from the tag set, not the lineage label,
because recombination can move the tag between lineages.
"""

from typing import List, Sequence, TYPE_CHECKING

from .host import Host

if TYPE_CHECKING:
    from .stage_context import StageContext


RESISTANT_SURVIVAL_PROBABILITY = 0.90
SUSCEPTIBLE_SURVIVAL_PROBABILITY = 0.05


def _select_host(host: Host, ctx: "StageContext") -> Host:
    rng = ctx.rng
    has_resistant = any(ind.is_drug_resistant for ind in host.population)

    if not has_resistant or rng.random() >= ctx.config.drug_pressure:
        return host

    survivors = []
    for ind in host.population:
        if ind.is_drug_resistant:
            survival_probability = RESISTANT_SURVIVAL_PROBABILITY
        else:
            survival_probability = SUSCEPTIBLE_SURVIVAL_PROBABILITY
        if rng.random() < survival_probability:
            survivors.append(ind)

    # Extinction guard
    if not survivors:
        return host

    return host.with_population(survivors)


def drug_selection(hosts: Sequence[Host], ctx: "StageContext") -> List[Host]:
    """
    Apply one round of drug treatment to every host.

    Args:
        hosts: Host list from the previous stage
        ctx: Stage context

    Returns:
        New host list; treated hosts may shrink
    """
    return [_select_host(host, ctx) for host in hosts]
