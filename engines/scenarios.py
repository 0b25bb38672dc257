#!/usr/bin/env python3
"""
Scenario Evaluator
Ranks what-if investment scenarios by qualification efficiency
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from engines.models import WhatIfScenario

EfficiencyFn = Callable[[WhatIfScenario], float]


def scenario_efficiency(scenario: WhatIfScenario) -> float:
    """
    Resulting qualification percentage per unit of investment.

    Deliberately the raw ratio, not the marginal gain over the current
    percentage. Investment is guaranteed positive by WhatIfScenario.
    """
    return scenario.new_qualification_percentage / scenario.investment


@dataclass(frozen=True)
class RankedScenario:
    scenario: WhatIfScenario
    efficiency: float


class ScenarioEvaluator:
    """Orders scenarios by efficiency; equal efficiencies keep input order"""

    def __init__(self, efficiency: Optional[EfficiencyFn] = None):
        self.efficiency = efficiency or scenario_efficiency

    def rank(self, scenarios: Sequence[WhatIfScenario]) -> List[RankedScenario]:
        if not scenarios:
            return []

        scores = np.array([self.efficiency(s) for s in scenarios], dtype=float)
        # stable sort on the negated score keeps the first occurrence ahead on ties
        order = np.argsort(-scores, kind="stable")

        return [RankedScenario(scenario=scenarios[i], efficiency=float(scores[i])) for i in order]

    def best(self, scenarios: Sequence[WhatIfScenario]) -> Optional[WhatIfScenario]:
        """Most efficient scenario, or None when there are no scenarios"""
        ranked = self.rank(scenarios)
        return ranked[0].scenario if ranked else None
