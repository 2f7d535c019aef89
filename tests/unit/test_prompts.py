'''
Unit tests for the agent catalogue and prompt rendering.
'''

from __future__ import annotations

import pytest

from watsonx_gateway.models import FileContext
from watsonx_gateway.services import (
    AGENT_NAMES,
    DEFAULT_SYSTEM_PROMPT,
    SYSTEM_PROMPTS,
    build_generation_input,
    build_prompt_body,
    get_system_prompt,
)


class TestAgentTables:
    '''
    The prompt and display-name tables describe the same agents.
    '''

    def test_tables_cover_same_agents(self) -> None:
        assert list(AGENT_NAMES) == list(SYSTEM_PROMPTS)
        assert list(AGENT_NAMES) == [
            'codebase-analysis',
            'dependency-graph',
            'qa-agent',
            'code-modifier',
            'code-review',
            'documentation',
            'pushing-agent',
        ]

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            SYSTEM_PROMPTS['qa-agent'] = 'overridden'  # type: ignore[index]
        with pytest.raises(TypeError):
            AGENT_NAMES['new-agent'] = 'New'  # type: ignore[index]

    @pytest.mark.parametrize(
        'agent_id, expected_opening',
        [
            ('codebase-analysis', 'You are an expert code analyzer.'),
            ('dependency-graph', 'You are a dependency analysis expert.'),
            ('qa-agent', 'You are a helpful code assistant.'),
            ('code-modifier', 'You are an expert code modifier.'),
            ('code-review', 'You are an expert code reviewer.'),
            ('documentation', 'You are a documentation expert.'),
            ('pushing-agent', 'You are a Git workflow assistant.'),
        ],
    )
    def test_known_agent_prompt(self, agent_id: str, expected_opening: str) -> None:
        assert get_system_prompt(agent_id).startswith(expected_opening)

    def test_unknown_agent_gets_default_prompt(self) -> None:
        assert get_system_prompt('no-such-agent') == DEFAULT_SYSTEM_PROMPT
        assert get_system_prompt('') == DEFAULT_SYSTEM_PROMPT


class TestPromptBody:
    '''
    Rendering of the user part of the prompt.
    '''

    def test_message_only(self) -> None:
        assert build_prompt_body('What does foo() do?') == 'User Request: What does foo() do?'

    def test_single_file_with_language(self) -> None:
        body = build_prompt_body(
            'Review this',
            [FileContext(path='a.py', content='x=1', language='python')],
        )

        assert body == (
            '=== CODE CONTEXT ===\n\n'
            '--- File: a.py (python) ---\n'
            'x=1\n\n'
            '=== END CODE CONTEXT ===\n\n'
            'User Request: Review this'
        )

    def test_file_without_language_has_no_tag(self) -> None:
        body = build_prompt_body('hi', [FileContext(path='README', content='text')])

        assert '--- File: README ---\ntext\n\n' in body
        assert '()' not in body

    def test_files_keep_order(self) -> None:
        body = build_prompt_body(
            'hi',
            [
                FileContext(path='first.ts', content='1', language='typescript'),
                FileContext(path='second.ts', content='2', language='typescript'),
            ],
        )

        assert body.index('first.ts') < body.index('second.ts') < body.index('User Request:')

    def test_generation_input_joins_with_blank_line(self) -> None:
        text = build_generation_input('qa-agent', 'What does foo() do?')

        assert text == SYSTEM_PROMPTS['qa-agent'] + '\n\nUser Request: What does foo() do?'
