'''
Unit tests for the HTTP surface.
'''

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from watsonx_gateway.core import AuthenticationError
from watsonx_gateway.main import create_app
from watsonx_gateway.services import SYSTEM_PROMPTS, get_agent_gateway


@pytest.fixture
def client(gateway) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_agent_gateway] = lambda: gateway
    return TestClient(app)


class TestChatRoutes:
    '''
    Chat endpoints always answer 200 with a ChatResponse body.
    '''

    def test_chat_success(self, client) -> None:
        response = client.post(
            '/api/watsonx/chat',
            json={
                'agentId': 'qa-agent',
                'message': 'What does foo() do?',
                'files': [{'path': 'foo.py', 'content': 'def foo(): ...', 'language': 'python'}],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['agentId'] == 'qa-agent'
        assert body['response'] == 'Hello'
        assert body['toolCalls'] == []
        assert body['errorMessage'] is None
        assert 'timestamp' in body
        assert 'X-Request-ID' in response.headers

    def test_chat_failure_is_still_200(self, client, fake_client) -> None:
        fake_client.fetch_token.side_effect = AuthenticationError('Failed to authenticate with IBM Cloud: 401')

        response = client.post('/api/watsonx/chat', json={'agentId': 'code-review', 'message': 'hi'})

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is False
        assert body['agentId'] == 'code-review'
        assert body['errorMessage'] == 'Failed to authenticate with IBM Cloud: 401'

    def test_extra_file_keys_accepted(self, client) -> None:
        response = client.post(
            '/api/watsonx/chat',
            json={
                'agentId': 'qa-agent',
                'message': 'hi',
                'files': [{'path': 'a.py', 'content': 'x=1', 'lastModified': 1700000000}],
            },
        )

        assert response.status_code == 200
        assert response.json()['success'] is True

    @pytest.mark.parametrize(
        'payload',
        [
            {'message': 'hi'},
            {'agentId': 'qa-agent'},
            {'agentId': '   ', 'message': 'hi'},
            {'agentId': 'qa-agent', 'message': ''},
        ],
    )
    def test_invalid_request_rejected(self, client, fake_client, payload) -> None:
        response = client.post('/api/watsonx/chat', json=payload)

        assert response.status_code == 422
        fake_client.generate.assert_not_awaited()

    @pytest.mark.parametrize(
        'path, agent_id',
        [
            ('/api/watsonx/analyze', 'codebase-analysis'),
            ('/api/watsonx/review', 'code-review'),
            ('/api/watsonx/document', 'documentation'),
            ('/api/watsonx/ask', 'qa-agent'),
            ('/api/watsonx/modify', 'code-modifier'),
            ('/api/watsonx/dependencies', 'dependency-graph'),
            ('/api/watsonx/git-help', 'pushing-agent'),
        ],
    )
    def test_alias_routes(self, client, fake_client, path: str, agent_id: str) -> None:
        response = client.post(path, json={'agentId': 'ignored', 'message': 'hi'})

        assert response.status_code == 200
        assert response.json()['agentId'] == agent_id
        token, payload = fake_client.generate.await_args.args
        assert payload['input'].startswith(SYSTEM_PROMPTS[agent_id])


class TestInfoRoutes:
    '''
    Agent listing and health.
    '''

    def test_list_agents(self, client) -> None:
        response = client.get('/api/watsonx/agents')

        assert response.status_code == 200
        agents = response.json()
        assert len(agents) == 7
        assert {'id': 'pushing-agent', 'name': 'Pushing Agent'} in agents

    def test_watsonx_health(self, client) -> None:
        response = client.get('/api/watsonx/health')

        assert response.status_code == 200
        assert response.json() == {
            'configured': True,
            'spaceId': 'space-123',
            'endpoint': 'https://wx.example.test',
            'authenticated': True,
        }

    def test_watsonx_health_with_error(self, client, fake_client) -> None:
        fake_client.fetch_token.side_effect = AuthenticationError('IAM rejected the key')

        body = client.get('/api/watsonx/health').json()

        assert body['authenticated'] is False
        assert body['error'] == 'IAM rejected the key'

    def test_liveness(self, client) -> None:
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_request_id_is_echoed(self, client) -> None:
        response = client.get('/health', headers={'X-Request-ID': 'req-42'})

        assert response.headers['X-Request-ID'] == 'req-42'


class TestToolStubs:
    '''
    Tool endpoints return fixed shapes without touching the filesystem.
    '''

    def test_read_file(self, client) -> None:
        body = client.post('/api/watsonx/tools/read-file', json={'path': 'src/app.py'}).json()

        assert body['success'] is True
        assert body['path'] == 'src/app.py'
        assert 'placeholder' in body['content']

    def test_write_file_reports_length(self, client) -> None:
        body = client.post(
            '/api/watsonx/tools/write-file', json={'path': 'a.txt', 'content': 'hello'}
        ).json()

        assert body['message'].endswith('content length: 5')

    def test_list_files_default_directory(self, client) -> None:
        body = client.post('/api/watsonx/tools/list-files', json={}).json()

        assert body['directory'] == '/'
        assert body['files'] == ['src/', 'package.json', 'README.md']

    def test_git_push_defaults(self, client) -> None:
        body = client.post('/api/watsonx/tools/git-push', json={}).json()

        assert (body['remote'], body['branch']) == ('origin', 'main')

    @pytest.mark.parametrize(
        'tool',
        ['analyze-file', 'git-status', 'git-commit', 'search-code'],
    )
    def test_other_tools_succeed(self, client, tool: str) -> None:
        response = client.post(f'/api/watsonx/tools/{tool}', json={'message': 'm', 'query': 'q', 'path': 'p'})

        assert response.status_code == 200
        assert response.json()['success'] is True
