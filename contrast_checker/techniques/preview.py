"""Render a preview swatch per pair: sample text in the foreground colour on the background.

Each PNG shows the sample sentence at normal (16px) and large (24px)
text size, followed by the ratio and the normal/large levels. Files are
written to --out-dir (default: $CONTRAST_CHECKER_OUT_DIR or
./contrast-previews) as <label>.png, with a -2, -3, ... suffix when two
labels map to the same file name.

Like a live preview, this never fails on bad input: when a pair does not
normalise, the default pair ($CONTRAST_CHECKER_DEFAULT_FG on
$CONTRAST_CHECKER_DEFAULT_BG, white on black unless set) is rendered
instead and a note is written to stderr. Use `check` to surface invalid
colours as errors.

Set $CONTRAST_CHECKER_FONT to a .ttf path to render with that font.

Example:
    contrast-checker preview red white navy yellow --out-dir ./tmp
    contrast-checker preview --pairs palette.txt
"""

import os
import re
import sys

from PIL import Image, ImageDraw, ImageFont

from contrast_checker.core.contrast import evaluate
from contrast_checker.core.env import Settings
from contrast_checker.core.types import ColorPair, Err, Evaluation, Report, Technique

technique = Technique(
    name='preview',
    help='Render sample text in fg on bg as PNG swatches. Falls back to defaults on bad input.',
)

NORMAL_PX = 16
LARGE_PX = 24
CAPTION_PX = 14
PADDING = 16
LINE_GAP = 10

_UNSAFE = re.compile(r'[^A-Za-z0-9_.-]+')


@technique.arguments
def add_arguments(parser) -> None:
    parser.add_argument('-o', '--out-dir', help='Directory for preview PNGs (default: $CONTRAST_CHECKER_OUT_DIR)')


def _font(settings: Settings, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    if settings.font_path:
        return ImageFont.truetype(settings.font_path, size)
    return ImageFont.load_default(size=size)


def render_preview(evaluation: Evaluation, settings: Settings) -> Image.Image:
    """Draw the swatch for one evaluated pair."""
    caption = (
        f'{evaluation.ratio:.2f}:1  normal {evaluation.level_normal.value}  large {evaluation.level_large.value}'
    )
    rows = [
        (settings.sample_text, _font(settings, NORMAL_PX)),
        (settings.sample_text, _font(settings, LARGE_PX)),
        (caption, _font(settings, CAPTION_PX)),
    ]

    # Measure on a scratch canvas first
    scratch = ImageDraw.Draw(Image.new('RGB', (1, 1)))
    boxes = [scratch.textbbox((0, 0), text, font=font) for text, font in rows]
    width = max(box[2] for box in boxes) + 2 * PADDING
    height = sum(box[3] for box in boxes) + LINE_GAP * (len(rows) - 1) + 2 * PADDING

    image = Image.new('RGB', (width, height), evaluation.bg_normalized)
    draw = ImageDraw.Draw(image)
    y = PADDING
    for (text, font), box in zip(rows, boxes):
        draw.text((PADDING, y), text, fill=evaluation.fg_normalized, font=font)
        y += box[3] + LINE_GAP
    return image


def _preview_path(out_dir: str, label: str, used: set[str]) -> str:
    # Distinct labels can sanitise to the same name; compare casefolded for
    # case-insensitive filesystems
    name = _UNSAFE.sub('-', label).strip('-') or 'preview'
    candidate = name
    n = 2
    while candidate.casefold() in used:
        candidate = f'{name}-{n}'
        n += 1
    used.add(candidate.casefold())
    return os.path.join(out_dir, f'{candidate}.png')


@technique.run
def run(pairs: list[ColorPair], report: Report, args) -> None:
    settings = Settings.from_env()
    out_dir = getattr(args, 'out_dir', None) or settings.out_dir
    os.makedirs(out_dir, exist_ok=True)
    used: set[str] = set()

    for pair in pairs:
        result = evaluate(pair.fg, pair.bg)
        fallback = isinstance(result, Err)
        if fallback:
            print(
                f'contrast-checker: preview {pair.label}: invalid color {result.error.token!r}, using defaults',
                file=sys.stderr,
            )
            result = evaluate(settings.default_fg, settings.default_bg)
        evaluation = result.unwrap()

        path = _preview_path(out_dir, pair.label, used)
        image = render_preview(evaluation, settings)
        image.save(path)

        data = evaluation.to_dict()
        data['file'] = path
        data['width'] = image.width
        data['height'] = image.height
        data['fallback'] = fallback
        report.add(pair.label, 'preview', data)
