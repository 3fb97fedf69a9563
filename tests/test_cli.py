"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from arganalyzer import cli
from arganalyzer.client import AnalysisClient

from conftest import make_response

runner = CliRunner()


@pytest.fixture
def cli_client(test_config, mock_session, monkeypatch):
    client = AnalysisClient(test_config, session=mock_session)
    monkeypatch.setattr(cli, "get_client", lambda: client)
    return client


def test_analyze(cli_client, mock_session):
    mock_session.post.return_value = make_response(
        200,
        {
            "mainClaim": "Socrates is mortal",
            "supportingArguments": ["All men are mortal"],
            "structure": "syllogism",
            "strength": "strong",
        },
    )

    result = runner.invoke(cli.app, ["analyze", "Socrates is a man."])

    assert result.exit_code == 0
    assert "Socrates is mortal" in result.output
    assert "All men are mortal" in result.output


def test_blank_input_is_rejected(cli_client, mock_session):
    result = runner.invoke(cli.app, ["analyze", "   "])

    assert result.exit_code == 1
    mock_session.post.assert_not_called()


def test_analyze_failure(cli_client, mock_session):
    mock_session.post.return_value = make_response(500, {})

    result = runner.invoke(cli.app, ["analyze", "Some argument"])

    assert result.exit_code == 1
    assert "API error: 500" in result.output


def test_validate_failure_is_shown_as_invalid(cli_client, mock_session):
    mock_session.post.return_value = make_response(502, {})

    result = runner.invoke(cli.app, ["validate", "Some argument"])

    assert result.exit_code == 0
    assert "Invalid argument" in result.output
    assert "Error: API error: 502" in result.output
    assert "Please try again." in result.output


def test_validate_success(cli_client, mock_session):
    mock_session.post.return_value = make_response(
        200, {"isValid": True, "analysis": "Modus ponens", "explanation": "Sound."}
    )

    result = runner.invoke(cli.app, ["validate", "Some argument"])

    assert result.exit_code == 0
    assert "Valid argument" in result.output
    assert "Modus ponens" in result.output


def test_fallacies_none(cli_client, mock_session):
    mock_session.post.return_value = make_response(200, [])

    result = runner.invoke(cli.app, ["fallacies", "Some argument"])

    assert result.exit_code == 0
    assert "No fallacies detected" in result.output


def test_fallacies_table(cli_client, mock_session):
    mock_session.post.return_value = make_response(
        200,
        [{"type": "Ad Hominem", "description": "d", "location": "l", "explanation": "e"}],
    )

    result = runner.invoke(cli.app, ["fallacies", "Some argument"])

    assert result.exit_code == 0
    assert "Ad Hominem" in result.output


def test_chat_stub(cli_client):
    result = runner.invoke(cli.app, ["chat", "hello"])

    assert result.exit_code == 1
    assert "currently unavailable" in result.output
