"""Fixed-width access statistics table."""

from __future__ import annotations

from collections.abc import Mapping

from fijos.constants.reporting import (
    ACCESS_REPORT_EMPTY,
    ACCESS_REPORT_TITLE,
    ACCESSES_COLUMN_WIDTH,
    ELLIPSIS_SUFFIX,
    FIXTURE_COLUMN_WIDTH,
    RULE_CHAR,
    RULE_WIDTH,
)


def _truncate(name: str) -> str:
    if len(name) <= FIXTURE_COLUMN_WIDTH:
        return name
    return name[: FIXTURE_COLUMN_WIDTH - len(ELLIPSIS_SUFFIX)] + ELLIPSIS_SUFFIX


def render_access_report(counts: Mapping[str, int]) -> str:
    """Render access counts as a table sorted by descending count, then name."""
    if not counts:
        return ACCESS_REPORT_EMPTY

    rows = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    rule = RULE_CHAR * RULE_WIDTH
    lines = [
        f"{ACCESS_REPORT_TITLE}:",
        rule,
        f"{'Fixture':<{FIXTURE_COLUMN_WIDTH}} {'Accesses':>{ACCESSES_COLUMN_WIDTH}}",
        rule,
    ]
    lines.extend(
        f"{_truncate(name):<{FIXTURE_COLUMN_WIDTH}} {count:>{ACCESSES_COLUMN_WIDTH}d}" for name, count in rows
    )
    lines.append(rule)
    lines.append(f"Total: {sum(counts.values())} accesses across {len(rows)} fixtures")
    return "\n".join(lines)
