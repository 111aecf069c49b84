# api/odontogram/aggregation.py

"""
Conteos del odontograma para el tablero.
Solo cuenta la condición de nivel diente; los dientes sin registro
cuentan como sanos.
"""

from collections import Counter
from typing import Dict, Iterable, Optional, Sequence

from api.odontogram.chart import ChartState
from api.odontogram.vocabulary import CONDICIONES_TRATADAS, Condition

CONDICIONES_TABLERO = (
    Condition.HEALTHY,
    Condition.CARIES,
    Condition.FILLED,
    Condition.MISSING,
)


def _condiciones(state: ChartState, teeth: Iterable[int]) -> Counter:
    return Counter(str(state.get(t).condition.value) for t in teeth)


def contar_condiciones(
    state: ChartState,
    teeth: Sequence[int],
    codes: Optional[Iterable] = None,
) -> Dict[str, int]:
    """
    Cuenta los dientes de `teeth` cuya condición coincide con cada código pedido.
    Por defecto: healthy, caries, filled, missing.
    """
    conteo = _condiciones(state, teeth)
    codes = CONDICIONES_TABLERO if codes is None else codes
    return {str(Condition(c).value): conteo.get(str(Condition(c).value), 0) for c in codes}


def contar_todas(state: ChartState, teeth: Sequence[int]) -> Dict[str, int]:
    """
    Todas las condiciones del catálogo más un grupo por cada código
    desconocido presente. La suma siempre es len(teeth).
    """
    conteo = _condiciones(state, teeth)
    resultado = {c.value: conteo.pop(c.value, 0) for c in Condition}
    resultado.update(sorted(conteo.items()))
    return resultado


def resumen_dashboard(state: ChartState, teeth: Sequence[int]) -> Dict[str, int]:
    conteo = _condiciones(state, teeth)
    total = len(teeth)
    sanos = conteo.get(Condition.HEALTHY.value, 0)
    return {
        'total': total,
        'healthy': sanos,
        'with_conditions': total - sanos,
        'caries': conteo.get(Condition.CARIES.value, 0),
        'missing': conteo.get(Condition.MISSING.value, 0),
        'treated': sum(conteo.get(c.value, 0) for c in CONDICIONES_TRATADAS),
    }
