"""Reveal animation presets shared by snippets, the embed page and the preview.

Every surface that shows a chart reads its pre-reveal state from here, so the
author's preview and the visitor's view start from the same transform.
"""

from typing import Optional, Union

from ..render_config.schemas import AnimationPreset

# Fraction of the wrapper that must be on screen before it reveals
REVEAL_THRESHOLD = 0.1

INITIAL_TRANSFORMS: dict[AnimationPreset, Optional[str]] = {
    AnimationPreset.FADE_UP: "translateY(20px)",
    AnimationPreset.FADE: None,
    AnimationPreset.POP: "scale(0.95)",
    AnimationPreset.REVEAL: "translateY(10px) scale(0.98)",
}


def resolve_preset(preset: Union[AnimationPreset, str, None]) -> AnimationPreset:
    """Map any preset value to a known preset; unknown values become fade-up."""
    try:
        return AnimationPreset(preset)
    except ValueError:
        return AnimationPreset.FADE_UP


def initial_transform(preset: Union[AnimationPreset, str, None]) -> Optional[str]:
    """CSS transform applied before reveal, or None for opacity-only presets."""
    return INITIAL_TRANSFORMS[resolve_preset(preset)]
