# src/core/models.py — v1
"""Per-call option models for the metrics.

Each option model is built once per call: defaults first, then the values
derived from Settings, then keyword overrides given by the caller.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from graphmetrics.config.settings import Settings


class BetweennessOptions(BaseModel):
    """Options for betweenness centrality."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    weighted: bool = False
    normalized: bool = True
    weight_attribute: str = "weight"
    centrality_attribute: str = "centrality"
    workers: int = Field(default=1, ge=1)

    @classmethod
    def from_settings(cls, settings: Settings) -> BetweennessOptions:
        return cls(
            weighted=settings.betweenness_weighted,
            normalized=settings.betweenness_normalized,
            weight_attribute=settings.betweenness_weight_attribute,
            centrality_attribute=settings.betweenness_centrality_attribute,
            workers=settings.betweenness_workers,
        )


class ModularityOptions(BaseModel):
    """Options for modularity.

    When ``communities`` is None, each node's community is read from its
    ``community_attribute``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    communities: dict[Hashable, Any] | None = None
    community_attribute: str = "community"
    weight_attribute: str = "weight"

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        communities: dict[Hashable, Any] | None = None,
    ) -> ModularityOptions:
        return cls(
            communities=communities,
            community_attribute=settings.modularity_community_attribute,
            weight_attribute=settings.modularity_weight_attribute,
        )


def resolve_options(options: BaseModel | None, model: type, overrides: dict) -> Any:
    """Merge keyword overrides on top of an options instance (or defaults).

    Overrides are validated by rebuilding the model, so unknown names and
    ill-typed values raise pydantic.ValidationError.
    """
    if options is None:
        return model(**overrides)
    if not isinstance(options, model):
        raise TypeError(
            f"options must be a {model.__name__}, got {type(options).__name__}"
        )
    if not overrides:
        return options
    return model(**{**options.model_dump(), **overrides})
