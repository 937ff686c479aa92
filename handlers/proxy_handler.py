"""OpenAI chat completions handler - forwards to Anthropic Messages API."""

import time
import logging
from flask import Blueprint, request, jsonify, current_app

from translator import ChatRequest, translate_error
from translator.anthropic_to_openai import build_error
from translator.errors import BackendCancelledError, BackendError, UnsupportedFeatureError

logger = logging.getLogger(__name__)

proxy_bp = Blueprint('proxy', __name__)

CHAT_PATH = '/v1/chat/completions'


def get_config():
    """Get config from Flask app context."""
    return current_app.config['BRIDGE_CONFIG']


def get_client():
    """Get the AnthropicClient from Flask app context."""
    return current_app.config['ANTHROPIC_CLIENT']


def get_log_manager():
    """Get log manager from Flask app context."""
    return current_app.config['LOG_MANAGER']


def verify_api_key():
    """Verify the caller's key matches the proxy access token."""
    config = get_config()

    api_key = ''
    auth_header = request.headers.get('Authorization', '')
    if auth_header.startswith('Bearer '):
        api_key = auth_header[7:]

    # Also accept x-api-key as fallback
    if not api_key:
        api_key = request.headers.get('x-api-key', '')

    if not api_key:
        return False, build_error('Missing API key', 'authentication_error', 401)

    if api_key != config.proxy_access_token:
        return False, build_error('Invalid API key', 'authentication_error', 401)

    return True, None


@proxy_bp.route(CHAT_PATH, methods=['POST'])
def chat_completions():
    """
    Handle OpenAI /v1/chat/completions requests.

    Translates to Anthropic format, calls the Messages API,
    translates the response back to OpenAI format.
    """
    start_time = time.time()
    config = get_config()
    log_manager = get_log_manager()

    def fail(error, status, body=None):
        log_manager.log_api_call('POST', CHAT_PATH, status, _elapsed_ms(start_time), body, error)
        return jsonify(error), status

    valid, error = verify_api_key()
    if not valid:
        return fail(error, 401)

    body = request.get_json(silent=True)
    if body is None:
        return fail(build_error('Invalid JSON body', 'invalid_request_error', 400), 400)
    if not isinstance(body, dict) or not body:
        return fail(build_error('Empty request body', 'invalid_request_error', 400), 400, body)

    try:
        chat_request = ChatRequest.from_dict(body)
        completion = get_client().create_chat_completion(chat_request, timeout=config.backend_timeout)
    except UnsupportedFeatureError as e:
        logger.info(f"Rejected request: {e.message}")
        return fail(e.to_dict(), e.code, body)
    except BackendCancelledError as e:
        logger.warning(f"Backend call cancelled: {e}")
        return fail(build_error('Request to Anthropic timed out', 'timeout', 504), 504, body)
    except BackendError as e:
        logger.error(f"{e} (retryable={e.retryable})")
        status = e.status_code or 502
        return fail(translate_error(e.error_body or {'error': {'message': e.message}}, status), status, body)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return fail(build_error(f'Internal error: {e}', 'server_error', 500), 500, body)

    response_data = completion.to_dict()
    log_manager.log_api_call('POST', CHAT_PATH, 200, _elapsed_ms(start_time), body, response_data,
                             prompt_tokens=completion.prompt_tokens,
                             completion_tokens=completion.completion_tokens)

    return jsonify(response_data), 200


def _elapsed_ms(start_time: float) -> int:
    return int((time.time() - start_time) * 1000)
