'''
Unit tests for configuration and logging helpers.
'''

from __future__ import annotations

import pytest
from pydantic import ValidationError

from watsonx_gateway.core import (
    AuthenticationError,
    MalformedResponseError,
    RemoteCallError,
    WatsonxConfig,
    mask_sensitive_data,
)
from watsonx_gateway.core.config import LoggingConfig, Settings
from watsonx_gateway.core.logging import get_logger, redact_credentials, setup_logging


class TestWatsonxConfig:
    '''
    watsonx settings come from WATSONX_* variables.
    '''

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv('WATSONX_API_KEY', 'env-key')
        monkeypatch.setenv('WATSONX_SPACE_ID', 'env-space')

        config = WatsonxConfig()

        assert config.api_key == 'env-key'
        assert config.space_id == 'env-space'
        assert config.is_configured is True

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv('WATSONX_ENDPOINT', raising=False)
        monkeypatch.delenv('WATSONX_IAM_URL', raising=False)

        config = WatsonxConfig(_env_file=None)

        assert config.endpoint == 'https://us-south.ml.cloud.ibm.com'
        assert config.iam_url == 'https://iam.cloud.ibm.com/identity/token'

    def test_missing_key_is_not_a_startup_error(self, monkeypatch) -> None:
        monkeypatch.delenv('WATSONX_API_KEY', raising=False)

        config = WatsonxConfig(_env_file=None)

        assert config.is_configured is False


class TestSettingsValidation:
    '''
    Invalid values are rejected at load time.
    '''

    def test_log_level_normalized(self) -> None:
        assert LoggingConfig(level='debug').level == 'DEBUG'

    def test_bad_log_format(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(format='xml')

    def test_bad_environment(self) -> None:
        with pytest.raises(ValidationError):
            Settings(environment='moon')


class TestLoggingHelpers:
    '''
    Credentials never reach log output.
    '''

    def test_sensitive_keys_redacted(self) -> None:
        event = redact_credentials(None, 'info', {
            'event': 'refresh',
            'api_key': 'secret',
            'nested': {'Authorization': 'Bearer x'},
            'status_code': 200,
        })

        assert event['api_key'] == '[REDACTED]'
        assert event['nested']['Authorization'] == '[REDACTED]'
        assert event['status_code'] == 200

    def test_form_body_redacted(self) -> None:
        event = redact_credentials(None, 'info', {'body': 'grant_type=x&apikey=secret'})

        assert event['body'] == '[REDACTED]'

    def test_mask_keeps_suffix(self) -> None:
        assert mask_sensitive_data('abcdefgh') == '****efgh'
        assert mask_sensitive_data('abc') == '***'

    def test_file_output_is_redacted(self, tmp_path) -> None:
        log_file = tmp_path / 'logs' / 'gateway.log'

        setup_logging(LoggingConfig(level='INFO', format='json', file_path=str(log_file)))
        try:
            get_logger('watsonx_gateway.file_test').info('iam call', apikey='secret-key', status_code=200)
        finally:
            setup_logging()

        text = log_file.read_text(encoding='utf-8')
        assert 'iam call' in text
        assert 'secret-key' not in text
        assert '[REDACTED]' in text


class TestExceptions:
    '''
    Error serialization.
    '''

    def test_to_dict(self) -> None:
        error = AuthenticationError('nope', error_code='iam_rejected', details={'status_code': 400})

        assert error.to_dict() == {
            'error': {
                'message': 'nope',
                'type': 'authentication_error',
                'code': 'iam_rejected',
                'status_code': 400,
            }
        }
        assert error.status_code == 401

    def test_status_defaults_and_override(self) -> None:
        assert RemoteCallError('down').status_code == 502
        assert RemoteCallError('slow', error_code='timeout', status_code=504).status_code == 504
        assert AuthenticationError().message == 'Authentication failed'

    def test_malformed_response_keeps_payload(self) -> None:
        error = MalformedResponseError(payload={'status': 'queued'})

        assert error.payload == {'status': 'queued'}
        assert error.to_dict()['error']['code'] == 'malformed_response'
