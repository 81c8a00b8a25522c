# core/formatters.py

# pure text utilities
# must never import from models!

from typing import Any, Callable, Iterable

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_bulleted_list(
    items: Iterable[Any],
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> str:
    return "\n".join(f"- {formatter(item)}" for item in items)


def format_field_label(field_name: str) -> str:
    return field_name[:1].upper() + field_name[1:]
