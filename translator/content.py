"""Flatten OpenAI message content (string or typed parts) into plain text."""

from typing import Any

from .types import Content, ContentPart, Parts, PlainText


def parse_content(raw: Any) -> Content:
    """Build the tagged content variant from a raw JSON `content` value."""
    if isinstance(raw, str):
        return PlainText(raw)

    if isinstance(raw, list):
        parts = []
        for part in raw:
            if isinstance(part, dict):
                text = part.get('text')
                parts.append(ContentPart(
                    type=str(part.get('type') or ''),
                    text=text if isinstance(text, str) else ''
                ))
            elif isinstance(part, str):
                parts.append(ContentPart(type='text', text=part))
        return Parts(parts)

    return PlainText('')


def extract_text(content: Content) -> str:
    """
    Return the flat text of a message's content.

    A non-empty plain string wins. Otherwise the text parts are joined with a
    single space; image/audio/other parts are dropped. Never raises.
    """
    if isinstance(content, PlainText):
        return content.text or ''

    if isinstance(content, Parts):
        return ' '.join(
            part.text for part in content.parts
            if part.type == 'text' and part.text
        )

    return ''
