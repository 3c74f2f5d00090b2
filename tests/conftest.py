"""Shared test fixtures. Today's answers are patched so no test hits nytbee.com."""
from unittest.mock import patch

import pytest

from hints_app import app as _flask_app

ANSWERS = ['ant', 'bee', 'cat', 'dog', 'eel']


@pytest.fixture
def answers():
    return list(ANSWERS)


@pytest.fixture
def app():
    _flask_app.config['TESTING'] = True
    yield _flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mock_answers(answers):
    """Patch the app's answer lookup with a fixed list."""
    with patch('hints_app.get_answers', return_value=answers) as mocked:
        yield mocked


@pytest.fixture(autouse=True)
def clear_answer_memory():
    """Each test starts without answers held in memory."""
    import hints_app
    hints_app._answers_by_date.clear()
    yield
    hints_app._answers_by_date.clear()
