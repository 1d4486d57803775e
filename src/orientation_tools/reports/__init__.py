"""Report registry: body name -> WGCCRE orientation model."""

from __future__ import annotations

import logging

from orientation_tools.constants import BODY_NAMES
from orientation_tools.reports import report_2009, report_2015
from orientation_tools.reports.base import (
    AngleExpression,
    Argument,
    BodyModel,
    PeriodicTerm,
    TimeUnit,
    Triple,
)

logger = logging.getLogger(__name__)

_BODY_MODELS: dict[str, BodyModel] = {
    model.name: model for model in (*report_2015.MODELS, *report_2009.MODELS)
}


def get_body_model(name: str) -> BodyModel | None:
    """Return the orientation model for a body name.

    Parameters:
        name: Exact, case-sensitive body name (e.g. 'Saturn').

    Returns:
        BodyModel or None if the name is not supported.
    """
    model = _BODY_MODELS.get(name) if isinstance(name, str) else None
    if model is None:
        logger.debug('No orientation model for %r', name)
    return model


def report_for(name: str) -> str | None:
    """Return the report identifier (e.g. 'WGCCRE2015') a body's model comes from."""
    model = get_body_model(name)
    return None if model is None else model.report


def iter_body_models() -> list[BodyModel]:
    """Models in dispatch order (Sol, Mercury, ..., Neptune)."""
    return [_BODY_MODELS[name] for name in BODY_NAMES]


__all__ = [
    'AngleExpression',
    'Argument',
    'BodyModel',
    'PeriodicTerm',
    'TimeUnit',
    'Triple',
    'get_body_model',
    'iter_body_models',
    'report_2009',
    'report_2015',
    'report_for',
]
