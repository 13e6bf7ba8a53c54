"""Report builder — text and JSON output for colour-kit commands."""

import json
from typing import Any

from colour_kit.core.types import Report


def _fmt_channels(channels: list[float]) -> str:
    return '(' + ', '.join(f'{c:.4f}' for c in channels) + ')'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    width = max((len(e['label']) for e in report.entries), default=0)
    for entry in report.entries:
        label = entry['label'].ljust(width)
        hexes = entry.get('hex', {})
        named = entry.get('nearest')
        near = f'  ~{named} (Δ={entry.get("nearest_distance", "?")})' if named else ''
        lines.append(f'── {label}  rgba{_fmt_channels(entry["channels"])}{near}')
        if 'bytes' in entry:
            r, g, b, a = entry['bytes']
            lines.append(f'  bytes: r={r} g={g} b={b} a={a}')
        for layout_name, text in hexes.items():
            packed = entry.get('packed', {}).get(layout_name)
            lines.append(f'  {layout_name:<5} {text:<10} {packed}')

    for key, value in report.notes.items():
        lines.append(f'{key}: {value}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'colours': report.entries,
    }
    if report.notes:
        obj['notes'] = report.notes
    return json.dumps(obj, indent=2)
