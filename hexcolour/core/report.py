"""Report builder — text and JSON output for hexcolour results."""

import json
from typing import Any

from hexcolour.core.adapter import pil_colour
from hexcolour.core.codec import decompose_rgba
from hexcolour.core.palette import format_hex, nearest_name
from hexcolour.core.types import Report


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f'{value:.4f}'
    if isinstance(value, dict):
        return ' '.join(f'{k}={_fmt(v)}' for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return '(' + ', '.join(_fmt(v) for v in value) + ')'
    return str(value)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'hexcolour {report.command}', '']
    for label, data in report.entries.items():
        lines.append(f'── {label}')
        if data.get('representable') is False:
            lines.append('  not representable as RGBA')
        for k, v in data.items():
            if k == 'representable':
                continue
            lines.append(f'  {k}: {_fmt(v)}')
        lines.append('')
    if report.unrepresentable:
        lines.append(f'{report.unrepresentable} colour(s) not representable as RGBA')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'colours': [{'input': label, **data} for label, data in report.entries.items()],
        'summary': {
            'total': len(report.entries),
            'unrepresentable': report.unrepresentable,
        },
    }
    return json.dumps(obj, indent=2)


def colour_fields(packed: int) -> dict[str, Any]:
    """Standard fields describing one packed RGBA value."""
    name, _dist = nearest_name(packed)
    return {
        'hex': format_hex(packed),
        'int': packed,
        'rgba': [round(v, 4) for v in decompose_rgba(packed)],
        'rgba8': list(pil_colour(packed)),
        'nearest': name,
    }
