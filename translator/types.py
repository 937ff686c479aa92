"""Request/response value objects for the OpenAI <-> Anthropic bridge."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Union

logger = logging.getLogger(__name__)


# Content: tagged variant of "plain string" vs "list of typed parts"

@dataclass
class ContentPart:
    """A single typed content part. Only 'text' parts carry text we use."""
    type: str
    text: str = ''


@dataclass
class PlainText:
    text: str = ''


@dataclass
class Parts:
    parts: List[ContentPart] = field(default_factory=list)


Content = Union[PlainText, Parts]


@dataclass
class ChatMessage:
    role: str
    content: Content = field(default_factory=PlainText)


@dataclass
class ChatRequest:
    """OpenAI /v1/chat/completions request.

    temperature/top_p use None for "not supplied"; 0.0 is a real value.
    """
    model: str = ''
    messages: List[ChatMessage] = field(default_factory=list)
    max_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stop: Union[None, str, List[str]] = None
    stream: bool = False

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> 'ChatRequest':
        """
        Build a ChatRequest from a parsed JSON body.

        Parsing is permissive: missing or mistyped fields fall back to defaults.
        """
        from .content import parse_content

        if not isinstance(body, dict):
            body = {}
        raw_messages = body.get('messages')
        if not isinstance(raw_messages, list):
            raw_messages = []

        messages = []
        for msg in raw_messages:
            if not isinstance(msg, dict):
                logger.debug(f"Skipping non-object message: {msg!r}")
                continue
            messages.append(ChatMessage(
                role=str(msg.get('role') or ''),
                content=parse_content(msg.get('content'))
            ))

        stop = body.get('stop')
        if isinstance(stop, list):
            stop = [s for s in stop if isinstance(s, str)]
        elif not isinstance(stop, str):
            stop = None

        return cls(
            model=str(body.get('model') or ''),
            messages=messages,
            max_tokens=_as_int(body.get('max_tokens')),
            max_completion_tokens=_as_int(body.get('max_completion_tokens')),
            temperature=_as_float(body.get('temperature')),
            top_p=_as_float(body.get('top_p')),
            stop=stop,
            stream=body.get('stream') is True,
        )


@dataclass
class BackendMessage:
    role: str
    text: str


@dataclass
class MessagesRequest:
    """Anthropic /v1/messages request."""
    model: str
    messages: List[BackendMessage]
    max_tokens: int
    system: Optional[str] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stop_sequences: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            'model': self.model,
            'max_tokens': self.max_tokens,
            'messages': [
                {'role': m.role, 'content': [{'type': 'text', 'text': m.text}]}
                for m in self.messages
            ],
        }
        if self.system:
            payload['system'] = [{'type': 'text', 'text': self.system}]
        if self.temperature is not None:
            payload['temperature'] = self.temperature
        if self.top_p is not None:
            payload['top_p'] = self.top_p
        if self.stop_sequences:
            payload['stop_sequences'] = list(self.stop_sequences)
        return payload


@dataclass
class ContentBlock:
    type: str
    text: str = ''


@dataclass
class MessagesResponse:
    """Anthropic /v1/messages response."""
    id: str = ''
    content: List[ContentBlock] = field(default_factory=list)
    stop_reason: Optional[str] = None
    input_tokens: int = 0
    output_tokens: int = 0
    model: str = ''

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> 'MessagesResponse':
        if not isinstance(body, dict):
            body = {}
        raw_content = body.get('content')
        if not isinstance(raw_content, list):
            raw_content = []

        blocks = []
        for block in raw_content:
            if isinstance(block, dict):
                text = block.get('text')
                blocks.append(ContentBlock(
                    type=str(block.get('type') or ''),
                    text=text if isinstance(text, str) else ''
                ))

        usage = body.get('usage')
        if not isinstance(usage, dict):
            usage = {}
        stop_reason = body.get('stop_reason')
        return cls(
            id=str(body.get('id') or ''),
            content=blocks,
            stop_reason=stop_reason if isinstance(stop_reason, str) else None,
            input_tokens=_as_int(usage.get('input_tokens')) or 0,
            output_tokens=_as_int(usage.get('output_tokens')) or 0,
            model=str(body.get('model') or ''),
        )


@dataclass
class ChatCompletion:
    """OpenAI chat.completion response with a single choice."""
    id: str
    created: int
    model: str
    content: str
    finish_reason: str
    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'object': 'chat.completion',
            'created': self.created,
            'model': self.model,
            'choices': [
                {
                    'index': 0,
                    'message': {
                        'role': 'assistant',
                        'content': self.content
                    },
                    'finish_reason': self.finish_reason
                }
            ],
            'usage': {
                'prompt_tokens': self.prompt_tokens,
                'completion_tokens': self.completion_tokens,
                'total_tokens': self.total_tokens
            }
        }


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None
