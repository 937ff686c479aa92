"""Unit tests for OpenAI -> Anthropic request translation."""

import pytest

from translator import DEFAULT_MAX_TOKENS, ChatRequest, translate_request


def _request(messages=None, **fields):
    body = {'model': 'claude-sonnet-4-5', 'messages': messages or [{'role': 'user', 'content': 'Hello'}]}
    body.update(fields)
    return ChatRequest.from_dict(body)


class TestMessages:
    def test_basic_conversion(self):
        result = translate_request(_request([{'role': 'user', 'content': 'Hello, world!'}]))

        assert result.model == 'claude-sonnet-4-5'
        assert result.max_tokens == 4096
        assert len(result.messages) == 1
        assert result.messages[0].role == 'user'
        assert result.messages[0].text == 'Hello, world!'
        assert result.system is None

    def test_system_prompt_is_lifted_out(self):
        result = translate_request(_request([
            {'role': 'system', 'content': 'You are a helpful assistant.'},
            {'role': 'user', 'content': 'Hi'},
        ]))

        assert result.system == 'You are a helpful assistant.'
        assert len(result.messages) == 1
        assert all(m.role != 'system' for m in result.messages)

    def test_last_system_message_wins(self):
        result = translate_request(_request([
            {'role': 'system', 'content': 'first'},
            {'role': 'user', 'content': 'Hi'},
            {'role': 'system', 'content': 'second'},
        ]))

        assert result.system == 'second'
        assert [m.role for m in result.messages] == ['user']

    def test_system_prompt_from_parts(self):
        result = translate_request(_request([
            {'role': 'system', 'content': [{'type': 'text', 'text': 'Be'}, {'type': 'text', 'text': 'brief.'}]},
            {'role': 'user', 'content': 'Hi'},
        ]))

        assert result.system == 'Be brief.'

    def test_multi_turn_order_preserved(self):
        result = translate_request(_request([
            {'role': 'user', 'content': 'What is 2+2?'},
            {'role': 'assistant', 'content': '2+2 equals 4.'},
            {'role': 'system', 'content': 'Answer in digits.'},
            {'role': 'user', 'content': 'And 3+3?'},
        ]))

        assert [(m.role, m.text) for m in result.messages] == [
            ('user', 'What is 2+2?'),
            ('assistant', '2+2 equals 4.'),
            ('user', 'And 3+3?'),
        ]

    def test_other_roles_are_skipped(self):
        result = translate_request(_request([
            {'role': 'user', 'content': 'call the tool'},
            {'role': 'tool', 'tool_call_id': 'call_1', 'content': '42'},
            {'role': 'developer', 'content': 'ignored'},
        ]))

        assert [m.role for m in result.messages] == ['user']

    def test_user_parts_drop_images(self):
        result = translate_request(_request([
            {'role': 'user', 'content': [
                {'type': 'text', 'text': 'What is in'},
                {'type': 'image_url', 'image_url': {'url': 'data:image/png;base64,AAAA'}},
                {'type': 'text', 'text': 'this picture?'},
            ]},
        ]))

        assert result.messages[0].text == 'What is in this picture?'

    def test_no_messages(self):
        result = translate_request(ChatRequest.from_dict({'model': 'claude-sonnet-4-5', 'messages': []}))

        assert result.messages == []
        assert result.max_tokens == DEFAULT_MAX_TOKENS


class TestMaxTokens:
    def test_default_when_unset(self):
        assert translate_request(_request()).max_tokens == 4096

    def test_max_tokens(self):
        assert translate_request(_request(max_tokens=1024)).max_tokens == 1024

    def test_max_completion_tokens_wins(self):
        result = translate_request(_request(max_tokens=1024, max_completion_tokens=2048))
        assert result.max_tokens == 2048

    @pytest.mark.parametrize('fields', [
        {'max_tokens': 0},
        {'max_tokens': -5},
        {'max_completion_tokens': 0},
        {'max_tokens': 'lots'},
    ])
    def test_non_positive_values_fall_back(self, fields):
        assert translate_request(_request(**fields)).max_tokens == 4096

    def test_non_positive_completion_tokens_falls_back_to_max_tokens(self):
        result = translate_request(_request(max_tokens=512, max_completion_tokens=0))
        assert result.max_tokens == 512

    def test_custom_default(self):
        assert translate_request(_request(), default_max_tokens=8192).max_tokens == 8192


class TestSamplingParams:
    def test_optional_params_copied(self):
        result = translate_request(_request(temperature=0.7, top_p=0.9, stop=['END', 'STOP']))

        assert result.temperature == 0.7
        assert result.top_p == 0.9
        assert result.stop_sequences == ['END', 'STOP']

    def test_zero_temperature_is_kept(self):
        result = translate_request(_request(temperature=0.0))

        assert result.temperature is not None
        assert result.temperature == 0.0
        assert result.to_dict()['temperature'] == 0.0

    def test_zero_top_p_is_kept(self):
        assert translate_request(_request(top_p=0)).to_dict()['top_p'] == 0.0

    def test_unset_params_are_not_injected(self):
        payload = translate_request(_request()).to_dict()

        assert 'temperature' not in payload
        assert 'top_p' not in payload
        assert 'stop_sequences' not in payload
        assert 'system' not in payload

    def test_single_stop_string(self):
        assert translate_request(_request(stop='###')).stop_sequences == ['###']

    @pytest.mark.parametrize('stop', ['', [], None])
    def test_empty_stop_omitted(self, stop):
        assert translate_request(_request(stop=stop)).stop_sequences is None


class TestPayload:
    def test_to_dict_shape(self):
        payload = translate_request(_request(
            [{'role': 'system', 'content': 'sys'}, {'role': 'user', 'content': 'Hi'}],
            max_tokens=100,
        )).to_dict()

        assert payload == {
            'model': 'claude-sonnet-4-5',
            'max_tokens': 100,
            'messages': [{'role': 'user', 'content': [{'type': 'text', 'text': 'Hi'}]}],
            'system': [{'type': 'text', 'text': 'sys'}],
        }


class TestMalformedRequest:
    @pytest.mark.parametrize('messages', [5, True, 'Hello', {'role': 'user'}])
    def test_non_list_messages_become_empty(self, messages):
        chat_request = ChatRequest.from_dict({'model': 'claude-sonnet-4-5', 'messages': messages})

        assert chat_request.messages == []
        assert translate_request(chat_request).messages == []

    def test_non_object_body(self):
        chat_request = ChatRequest.from_dict(['not', 'a', 'dict'])

        assert chat_request.model == ''
        assert chat_request.messages == []

    @pytest.mark.parametrize('stream', ['false', 'true', 1, None])
    def test_only_literal_true_enables_stream(self, stream):
        assert _request(stream=stream).stream is False

    def test_stream_true(self):
        assert _request(stream=True).stream is True
