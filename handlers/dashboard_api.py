"""Dashboard API endpoints for chat-bridge."""

import logging
from flask import Blueprint, request, jsonify, current_app

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint('dashboard', __name__)


def get_config():
    """Get config from Flask app context."""
    return current_app.config['BRIDGE_CONFIG']


def get_log_manager():
    """Get log manager from Flask app context."""
    return current_app.config['LOG_MANAGER']


@dashboard_bp.route('/api/config', methods=['GET'])
def get_configuration():
    """Get current configuration (with sensitive data redacted)."""
    config = get_config()

    return jsonify({
        'port': config.port,
        'localBaseUrl': f'http://localhost:{config.port}/v1',
        'anthropicBaseUrl': config.anthropic_base_url,
        'defaultMaxTokens': config.default_max_tokens,
        'backendTimeout': config.backend_timeout,
        'apiKeyConfigured': config.is_api_key_configured(),
        'sslVerify': config.get_verify_ssl(),
    })


@dashboard_bp.route('/api/status', methods=['GET'])
def get_status():
    """Get current system status."""
    config = get_config()
    usage = get_log_manager().get_usage_stats()

    return jsonify({
        'proxy': {
            'running': True,
            'port': config.port,
        },
        'backend': {
            'baseUrl': config.anthropic_base_url,
            'configured': config.is_api_key_configured(),
        },
        'requests': {
            'total': usage['total_requests'],
            'failed': usage['failed_requests'],
        }
    })


@dashboard_bp.route('/api/logs', methods=['GET'])
def get_logs():
    """Get all logs."""
    log_manager = get_log_manager()
    limit = request.args.get('limit', 50, type=int)

    return jsonify({
        'apiCalls': log_manager.get_api_calls(limit),
        'serverEvents': log_manager.get_server_events(limit),
    })


@dashboard_bp.route('/api/logs', methods=['DELETE'])
def clear_logs():
    """Clear all logs."""
    log_manager = get_log_manager()
    log_manager.clear_logs()

    return jsonify({'success': True, 'message': 'Logs cleared'})


@dashboard_bp.route('/api/usage', methods=['GET'])
def get_usage():
    """Get usage statistics."""
    return jsonify(get_log_manager().get_usage_stats())


@dashboard_bp.route('/api/usage/reset', methods=['POST'])
def reset_usage():
    """Reset usage statistics."""
    get_log_manager().reset_usage()

    return jsonify({'success': True, 'message': 'Usage statistics reset'})


@dashboard_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({'status': 'healthy', 'service': 'chat-bridge'})
