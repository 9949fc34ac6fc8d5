"""
Association sweeps over a case table.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from mvextras.association._common import AssociationResult, MeasureType
from mvextras.association._dispatch import associate
from mvextras.association.solution import AssociationParams, AssociationSolution
from mvextras.core.config import DEFAULT_CONFIG, AnalysisConfig
from mvextras.core.exceptions import SweepCancelled
from mvextras.core.result import Result
from mvextras.core.timing import Timer
from mvextras.core.validation import check_known_attributes
from mvextras.data import CaseTable

if TYPE_CHECKING:
    from mvextras.core.session import Session

logger = logging.getLogger(__name__)


def association_matrix(
    table: CaseTable,
    *,
    attributes: Sequence[str] | None = None,
    session: Session | None = None,
    config: AnalysisConfig | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> AssociationSolution:
    """
    Compute associations for every ordered pair of attributes.

    For m attributes this produces m*m records, diagonal included, in
    row-major order (predictor outer, response inner).

    Args:
        table: Source cases
        attributes: Attribute names to include, in order (all if None)
        session: If given, its hidden attributes are skipped and its config
            is used when config is None
        config: Analysis options
        should_cancel: Polled before each pair; returning True aborts

    Returns:
        AssociationSolution

    Raises:
        ValidationError: If an attribute name is not in the table
        SweepCancelled: If should_cancel() returned True

    Examples:
        >>> sol = association_matrix(table)
        >>> sol.matrix()
        >>> sol.get('team', 'height').measure
    """
    if config is None:
        config = session.config if session is not None else DEFAULT_CONFIG

    names = list(table.names) if attributes is None else list(attributes)
    check_known_attributes(names, table.names, 'attributes')
    if session is not None:
        names = session.visible(names)

    warnings_list: list[str] = []
    if not names:
        msg = f"No visible attributes in table {table.title!r}; nothing to compute"
        logger.warning(msg)
        warnings_list.append(msg)

    total = len(names) * len(names)
    logger.info("Association sweep over %d attributes (%d pairs) in %r",
                len(names), total, table.title)

    timer = Timer()
    timer.start()

    results: list[AssociationResult] = []
    with timer.section('associate'):
        for predictor in names:
            for response in names:
                if should_cancel is not None and should_cancel():
                    timer.stop()
                    logger.info("Association sweep cancelled after %d of %d pairs",
                                len(results), total)
                    raise SweepCancelled(
                        f"Association sweep cancelled after {len(results)} of {total} pairs",
                        completed=len(results),
                        total=total,
                    )
                results.append(associate(table, predictor, response, config=config))

    timer.stop()
    logger.info("Association sweep finished: %d pairs in %.3fs",
                total, timer.result()['total_seconds'])

    counts = {t.value: 0 for t in MeasureType}
    for r in results:
        counts[r.measure_type.value] += 1

    result = Result(
        params=AssociationParams(attributes=tuple(names), results=tuple(results)),
        info={
            'method': 'pairwise association',
            'n_attributes': len(names),
            'n_pairs': total,
            'measure_counts': counts,
            'npcr_mode': config.npcr_mode,
            'table': table.title,
        },
        timing=timer.result(),
        backend_name='cpu_streaming',
        warnings=tuple(warnings_list),
    )
    return AssociationSolution(_result=result, _table=table)
