"""
Weight constants

Default edge weights and the modifiers callers use to steer the shortest
path search toward (or away from) specific relationships.
"""

import math

from schema_analyzer.config.settings import settings

# ============================================================================
# Default edge weights
# ============================================================================

WEIGHT_FK: float = settings.weight_fk
WEIGHT_INHERITANCE_FK: float = settings.weight_inheritance_fk
WEIGHT_JUNCTION_TABLE: float = settings.weight_junction_table


# ============================================================================
# Cost modifiers
# ============================================================================

# Discount a relationship so it wins over equivalent alternatives
WEIGHT_IMPORTANT: float = 0.75

# Inflate a relationship so alternate routes are preferred
WEIGHT_IRRELEVANT: float = 2.0

# Never traverse this relationship
WEIGHT_IGNORE: float = math.inf
