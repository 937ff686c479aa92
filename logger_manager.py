"""Request/response logging and usage tracking for chat-bridge."""

import copy
import time
import logging
from typing import Any, Dict, List, Optional
from collections import deque
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

MAX_LOGGED_CONTENT = 500


@dataclass
class UsageStats:
    """Track token usage statistics."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_prompt_tokens: int = 0
    total_completion_tokens: int = 0
    total_latency_ms: int = 0
    session_start: float = field(default_factory=time.time)

    @property
    def success_rate(self) -> float:
        if self.total_requests == 0:
            return 100.0
        return (self.successful_requests / self.total_requests) * 100

    @property
    def avg_latency_ms(self) -> float:
        if self.successful_requests == 0:
            return 0.0
        return self.total_latency_ms / self.successful_requests

    @property
    def session_duration_seconds(self) -> float:
        return time.time() - self.session_start

    def to_dict(self) -> dict:
        return {
            'total_requests': self.total_requests,
            'successful_requests': self.successful_requests,
            'failed_requests': self.failed_requests,
            'success_rate': round(self.success_rate, 1),
            'total_prompt_tokens': self.total_prompt_tokens,
            'total_completion_tokens': self.total_completion_tokens,
            'total_tokens': self.total_prompt_tokens + self.total_completion_tokens,
            'avg_latency_ms': round(self.avg_latency_ms, 0),
            'session_duration_seconds': round(self.session_duration_seconds, 0),
        }


class LoggerManager:
    """Manages API call logging and usage statistics."""

    def __init__(self, max_logs: int = 100):
        self.max_logs = max_logs
        self.api_calls: deque = deque(maxlen=max_logs)
        self.server_events: deque = deque(maxlen=max_logs)
        self.usage = UsageStats()

    def log_api_call(
        self,
        method: str,
        path: str,
        status: int,
        duration_ms: int,
        request_data: Optional[Dict] = None,
        response_data: Optional[Dict] = None,
        prompt_tokens: int = 0,
        completion_tokens: int = 0
    ):
        """Log an API call with optional request/response data."""
        entry = {
            'timestamp': time.time(),
            'method': method,
            'path': path,
            'status': status,
            'duration_ms': duration_ms,
            'request': self._sanitize_for_log(request_data),
            'response': self._sanitize_for_log(response_data),
            'prompt_tokens': prompt_tokens,
            'completion_tokens': completion_tokens,
        }

        self.api_calls.appendleft(entry)

        self.usage.total_requests += 1
        if status < 400:
            self.usage.successful_requests += 1
            self.usage.total_latency_ms += duration_ms
            self.usage.total_prompt_tokens += prompt_tokens
            self.usage.total_completion_tokens += completion_tokens
        else:
            self.usage.failed_requests += 1

        token_info = ""
        if prompt_tokens or completion_tokens:
            token_info = f" | tokens: {prompt_tokens}+{completion_tokens}"
        logger.info(f"{method} {path} -> {status} ({duration_ms}ms){token_info}")

    def log_server_event(self, level: str, message: str, data: Optional[Dict] = None):
        """Log a server event."""
        entry = {
            'timestamp': time.time(),
            'level': level,
            'message': message,
            'data': data,
        }

        self.server_events.appendleft(entry)

        # Also log to standard logger
        log_func = getattr(logger, level.lower(), logger.info)
        log_func(message)

    def get_api_calls(self, limit: int = 50) -> List[Dict]:
        """Get recent API calls."""
        return list(self.api_calls)[:limit]

    def get_server_events(self, limit: int = 50) -> List[Dict]:
        """Get recent server events."""
        return list(self.server_events)[:limit]

    def get_usage_stats(self) -> Dict:
        """Get current usage statistics."""
        return self.usage.to_dict()

    def clear_logs(self):
        """Clear all logs (but preserve usage stats)."""
        self.api_calls.clear()
        self.server_events.clear()
        logger.info("Logs cleared")

    def reset_usage(self):
        """Reset usage statistics."""
        self.usage = UsageStats()
        logger.info("Usage statistics reset")

    def _sanitize_for_log(self, data: Optional[Dict]) -> Optional[Dict]:
        """Truncate long message content in a chat request or completion."""
        if data is None:
            return None

        sanitized = copy.deepcopy(data)

        # Request side: messages[].content (string or parts)
        for msg in sanitized.get('messages') or []:
            if isinstance(msg, dict):
                _truncate_content(msg)

        # Response side: choices[].message.content
        for choice in sanitized.get('choices') or []:
            if isinstance(choice, dict) and isinstance(choice.get('message'), dict):
                _truncate_content(choice['message'])

        return sanitized


def _truncate_content(holder: Dict[str, Any]):
    content = holder.get('content')
    if isinstance(content, str):
        holder['content'] = _truncate(content)
    elif isinstance(content, list):
        for part in content:
            if isinstance(part, dict) and isinstance(part.get('text'), str):
                part['text'] = _truncate(part['text'])


def _truncate(text: str) -> str:
    if len(text) > MAX_LOGGED_CONTENT:
        return text[:MAX_LOGGED_CONTENT] + '... [truncated]'
    return text
