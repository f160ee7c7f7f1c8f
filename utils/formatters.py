"""Shared formatting helper functions for display values."""

from utils.catalog import CATEGORY_ICONS, CATEGORY_LABELS


def format_category(value, with_icon=True) -> str:
    """Format a category token as a display label."""
    if value is None:
        return "N/A"
    key = getattr(value, "value", value)
    label = CATEGORY_LABELS.get(key, str(key).title())
    icon = CATEGORY_ICONS.get(key)
    if with_icon and icon:
        return f"{icon} {label}"
    return label


def format_result_count(count, total) -> str:
    """Format the number of matching terms."""
    if count is None or total is None:
        return "N/A"
    noun = "term" if total == 1 else "terms"
    if count == total:
        return f"{total:,} {noun}"
    return f"{count:,} of {total:,} {noun}"


def format_preview(text, max_length=90) -> str:
    """Shorten a preview to a single list line."""
    if not text:
        return ""
    text = " ".join(text.split())
    if len(text) <= max_length:
        return text
    return text[: max_length - 1].rstrip() + "…"


def format_link(link) -> str:
    """Format a reference link as markdown, with its description underneath."""
    if not link or not getattr(link, "url", None):
        return "N/A"

    parts = [f"[{link.name or link.url}]({link.url})"]
    if link.description:
        parts.append(f"  \n{link.description}")
    return "".join(parts)
