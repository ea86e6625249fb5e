"""WCAG contrast ratio and compliance classification.

Thresholds (lower bound inclusive):

    normal text   AAA >= 7.0   AA >= 4.5
    large text    AAA >= 4.5   AA >= 3.0
"""

import numpy as np

from contrast_checker.core.luminance import relative_luminance, relative_luminance_array
from contrast_checker.core.palette import hex_to_rgb, normalize
from contrast_checker.core.types import ComplianceLevel, Err, Evaluation, Ok, Result, TextSize

LUMINANCE_OFFSET = 0.05

NORMAL_AAA = 7.0
NORMAL_AA = 4.5
LARGE_AAA = 4.5
LARGE_AA = 3.0


def contrast_ratio(fg: str, bg: str) -> float:
    """Contrast ratio of two normalised colours. Symmetric, in [1, 21]."""
    fg_lum = relative_luminance(fg)
    bg_lum = relative_luminance(bg)
    l1 = max(fg_lum, bg_lum)
    l2 = min(fg_lum, bg_lum)
    return (l1 + LUMINANCE_OFFSET) / (l2 + LUMINANCE_OFFSET)


def compliance_normal(ratio: float) -> ComplianceLevel:
    if ratio >= NORMAL_AAA:
        return ComplianceLevel.AAA
    if ratio >= NORMAL_AA:
        return ComplianceLevel.AA
    return ComplianceLevel.FAIL


def compliance_large(ratio: float) -> ComplianceLevel:
    if ratio >= LARGE_AAA:
        return ComplianceLevel.AAA
    if ratio >= LARGE_AA:
        return ComplianceLevel.AA
    return ComplianceLevel.FAIL


def compliance(ratio: float, size: TextSize) -> ComplianceLevel:
    if size is TextSize.LARGE:
        return compliance_large(ratio)
    return compliance_normal(ratio)


def evaluate(fg_token: str, bg_token: str) -> Result[Evaluation]:
    """Normalise two raw tokens and classify their contrast.

    The foreground is normalised first, so when both tokens are invalid
    the Err carries the foreground token.
    """
    fg = normalize(fg_token)
    if isinstance(fg, Err):
        return fg
    bg = normalize(bg_token)
    if isinstance(bg, Err):
        return bg

    ratio = contrast_ratio(fg.value, bg.value)
    return Ok(
        Evaluation(
            ratio=ratio,
            level_normal=compliance_normal(ratio),
            level_large=compliance_large(ratio),
            fg_normalized=fg.value,
            bg_normalized=bg.value,
        )
    )


def contrast_matrix(colors: list[str]) -> np.ndarray:
    """Pairwise contrast ratios for normalised colours.

    Returns an (n, n) symmetric array with ones on the diagonal.
    """
    if not colors:
        return np.zeros((0, 0))
    rgb = np.array([hex_to_rgb(c) for c in colors], dtype=int)
    lum = relative_luminance_array(rgb)
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + LUMINANCE_OFFSET) / (darker + LUMINANCE_OFFSET)
