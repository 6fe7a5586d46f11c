"""Catalog of the layout modes the explorer offers.

Only the ``biflow-*`` modes are computed here. The rest name external
layout engines; they are listed so callers can validate a mode and
group modes in menus.
"""

from __future__ import annotations

__all__ = [
    "LAYOUT_CATEGORIES",
    "LayoutCategory",
    "LayoutOption",
    "all_modes",
    "is_known_mode",
]

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LayoutOption:
    """One selectable layout mode."""

    id: str
    label: str
    description: str
    computed_locally: bool = False


@dataclass(frozen=True)
class LayoutCategory:
    """A menu group of layout modes."""

    id: str
    label: str
    layouts: tuple[LayoutOption, ...] = field(default_factory=tuple)


LAYOUT_CATEGORIES: tuple[LayoutCategory, ...] = (
    LayoutCategory(
        "force",
        "Force-Directed",
        (
            LayoutOption("fcose", "fCoSE", "Spring-based force simulation"),
            LayoutOption("cola", "Cola", "Constraint-based"),
        ),
    ),
    LayoutCategory(
        "hierarchical",
        "Hierarchical",
        (
            LayoutOption("elk-layered-down", "ELK Layered ↓", "Top-to-bottom flow"),
            LayoutOption("elk-layered-right", "ELK Layered →", "Left-to-right flow"),
            LayoutOption("dagre-tb", "Dagre ↓", "Lightweight top-down"),
            LayoutOption("dagre-lr", "Dagre →", "Lightweight left-right"),
        ),
    ),
    LayoutCategory(
        "flow",
        "Flow",
        (
            LayoutOption("directed-flow", "Directed Flow", "Radial outward flow by tx direction"),
            LayoutOption("biflow-lr", "BiFlow →", "Incoming left, outgoing right", True),
            LayoutOption("biflow-tb", "BiFlow ↓", "Incoming above, outgoing below", True),
        ),
    ),
    LayoutCategory(
        "other",
        "Other",
        (LayoutOption("elk-stress", "ELK Stress", "Stress minimization"),),
    ),
)


def all_modes() -> list[str]:
    """Every mode id, in menu order."""
    return [opt.id for cat in LAYOUT_CATEGORIES for opt in cat.layouts]


def is_known_mode(mode: str) -> bool:
    return mode in all_modes()
