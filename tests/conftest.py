import os

import pytest

os.environ.setdefault("GRAMMAR_CHECKER_ENABLED", "true")
os.environ.setdefault("OFFSET_UNIT", "codepoint")

from app.services.grammar.rule_engine import RuleEngine  # noqa: E402


@pytest.fixture
def engine():
    return RuleEngine()
