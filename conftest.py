"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration
- Shared fixtures across all tests
"""

import base64
import sys
from io import BytesIO
from pathlib import Path
from types import SimpleNamespace
from typing import Any, List, Optional

import logfire
import pytest


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    # Add project root to sys.path so the top-level packages are importable
    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the HTTP API end to end"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests; nothing leaves the machine
    logfire.configure(
        service_name="outreach_wizard_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )

    logfire.instrument_pydantic_ai()

    logfire.info(
        "Starting test suite",
        project_root=str(project_root),
        python_path=sys.path[:3],  # Log first 3 paths for debugging
    )


def pytest_sessionfinish(session, exitstatus):
    """Log test session completion with summary statistics."""
    logfire.info(
        "Test suite completed",
        exit_status=exitstatus,
        tests_collected=session.testscollected,
        tests_failed=session.testsfailed,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"API_KEY": "test-key", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite database with the stored_entries table."""
    from sqlalchemy import create_engine
    from sqlalchemy.pool import StaticPool

    from database.base import Base
    import models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the in-memory database."""
    from sqlalchemy.orm import sessionmaker

    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def storage(session_factory):
    """DatabaseKeyValueStore over the in-memory database."""
    from services.storage import DatabaseKeyValueStore

    return DatabaseKeyValueStore(session_factory=session_factory)


# ============================================================================
# Fake Model Fixtures
# ============================================================================

class FakeAgent:
    """
    Stand-in for a pydantic-ai Agent.

    Each run() pops the next scripted response. A response that is an
    exception instance is raised instead of returned.
    """

    def __init__(self, responses: List[Any]):
        self.responses = list(responses)
        self.prompts: List[list] = []

    async def run(self, user_prompt):
        self.prompts.append(user_prompt)
        if not self.responses:
            raise AssertionError("FakeAgent ran out of scripted responses")

        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return SimpleNamespace(output=response)


@pytest.fixture
def fake_agent():
    """Factory: fake_agent("text", RuntimeError("boom"), ...)"""
    def _make(*responses: Any) -> FakeAgent:
        return FakeAgent(list(responses))

    return _make


# ============================================================================
# Domain Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def pdf_bytes() -> bytes:
    """A minimal one-page PDF."""
    from pypdf import PdfWriter

    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def resume_facts(pdf_bytes):
    """Resume facts as the parser would return them."""
    from gateway.models.core import ResumeFacts

    return ResumeFacts(
        file_name="resume.pdf",
        data=base64.b64encode(pdf_bytes).decode("ascii"),
        applicant_name="Jordan Lee",
        skills=["Python", "PyTorch", "ROS"],
        education_level="B.S. in Computer Science",
        projects=[
            "Built a reinforcement-learning controller for a quadruped robot.",
            "Wrote a SLAM benchmark for indoor drones.",
        ],
    )


def make_contact(name: str, email: Optional[str], title: str = "Associate Professor"):
    from gateway.models.core import Contact

    return Contact(
        name=name,
        title=title,
        email=email,
        researchInterests="Robot learning and manipulation.",
    )


@pytest.fixture
def contacts():
    """Three contacts; the second has no email."""
    return [
        make_contact("Ada Smith", "asmith@stanford.edu"),
        make_contact("Bo Chen", None, title="PhD Student"),
        make_contact("Cy Patel", "cpatel@stanford.edu", title="Research Scientist"),
    ]
