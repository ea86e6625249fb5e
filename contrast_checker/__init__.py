"""WCAG 2.x colour contrast checking.

    >>> from contrast_checker import evaluate
    >>> result = evaluate('red', 'white')
    >>> result.unwrap().level_large.value
    'AA'
"""

from contrast_checker.core.contrast import (
    compliance,
    compliance_large,
    compliance_normal,
    contrast_matrix,
    contrast_ratio,
    evaluate,
)
from contrast_checker.core.luminance import relative_luminance, relative_luminance_array
from contrast_checker.core.palette import NAMED_COLORS, is_valid_color, normalize
from contrast_checker.core.types import ComplianceLevel, Err, Evaluation, InvalidColor, Ok, Result, TextSize

__version__ = '0.1.0'

__all__ = [
    'NAMED_COLORS',
    'ComplianceLevel',
    'Err',
    'Evaluation',
    'InvalidColor',
    'Ok',
    'Result',
    'TextSize',
    'compliance',
    'compliance_large',
    'compliance_normal',
    'contrast_matrix',
    'contrast_ratio',
    'evaluate',
    'is_valid_color',
    'normalize',
    'relative_luminance',
    'relative_luminance_array',
]
