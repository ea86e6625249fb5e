"""Report builder: text and JSON output for contrast-checker results."""

import json
import os
from typing import Any

from contrast_checker.core.types import Report


def _mark(data: dict[str, Any]) -> str:
    if 'pass' not in data:
        return ''
    return '  ✓' if data['pass'] else '  ✗'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'contrast-checker: {report.title}'
    if report.source:
        header += f' — {os.path.basename(report.source)} ({len(report.entries)} entries)'
    lines.append(header)
    lines.append('')

    for label, entry in report.entries.items():
        tokens = entry.get('input')
        shown = f' [{" / ".join(tokens)}]' if tokens else ''
        lines.append(f'── {label}{shown}')

        for tech_name, data in entry.get('techniques', {}).items():
            if 'error' in data:
                lines.append(f'  error: {data["error"]} {data.get("token", "")!r}')
            elif tech_name == 'check':
                lines.append(
                    f'  {data["fg"]} on {data["bg"]}  ratio {data["ratio"]:.2f}:1'
                    f'  normal {data["level_normal"]}  large {data["level_large"]}{_mark(data)}'
                )
            elif tech_name == 'normalize':
                lines.append(f'  normalized: {data["normalized"]}')
            elif tech_name == 'luminance':
                r, g, b = data['rgb']
                lines.append(f'  {data["hex"]}  rgb({r}, {g}, {b})  luminance {data["luminance"]:.4f}')
            elif tech_name == 'preview':
                fallback = '  (defaults)' if data.get('fallback') else ''
                lines.append(f'  preview: {data["file"]}  ratio {data["ratio"]:.2f}:1{fallback}')
            elif tech_name == 'grid':
                for other, cell in data.get('against', {}).items():
                    lines.append(f'  on {other:<12} {cell["ratio"]:>6.2f}:1  {cell["level"]}{_mark(cell)}')
            else:
                for k, v in data.items():
                    lines.append(f'  {tech_name}.{k}: {v}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    if report.error_count:
        lines.append(f'INVALID {report.error_count} input(s)')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'title': report.title}
    if report.source:
        obj['source'] = report.source

    obj['entries'] = [
        {
            'label': label,
            'input': entry.get('input'),
            'techniques': entry.get('techniques', {}),
        }
        for label, entry in report.entries.items()
    ]

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
        'invalid': report.error_count,
    }
    return json.dumps(obj, indent=2)
