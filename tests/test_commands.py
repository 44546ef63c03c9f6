# Copyright (c) 2025 Kenneth Stott
#
# Tests for the commands module.

"""Tests for command classification and dispatch."""

import pytest
from unittest.mock import Mock

from sqlplusplus.commands import (
    CommandDispatcher,
    CommandKind,
    parse_command,
)
from sqlplusplus.driver.errors import ConnectionLostError, DatabaseError
from sqlplusplus.pager import UNBOUNDED_PAGE_SIZE
from sqlplusplus.repl.history import LineHistory
from sqlplusplus.session import Session


class TestParseCommand:
    """Tests for logical line classification."""

    def test_exit(self):
        assert parse_command(".exit").kind is CommandKind.EXIT
        assert parse_command("  .exit  ").kind is CommandKind.EXIT

    def test_continue(self):
        assert parse_command(".it").kind is CommandKind.CONTINUE_FETCH

    def test_meta_commands_match_exactly(self):
        assert parse_command(".exit now").kind is CommandKind.SQL
        assert parse_command(".IT").kind is CommandKind.SQL
        assert parse_command(".items").kind is CommandKind.SQL

    def test_describe(self):
        command = parse_command(".describe employees")
        assert command.kind is CommandKind.DESCRIBE
        assert command.argument == "employees"
        assert command.text == ".describe employees"

    def test_describe_needs_a_table(self):
        assert parse_command(".describe").kind is CommandKind.SQL
        assert parse_command(".describe   ").kind is CommandKind.SQL

    def test_sql(self):
        command = parse_command("  SELECT 1 FROM dual ")
        assert command.kind is CommandKind.SQL
        assert command.text == "SELECT 1 FROM dual"
        assert command.line == "  SELECT 1 FROM dual "

    def test_records_history(self):
        assert parse_command("SELECT 1").records_history
        assert parse_command(".describe t").records_history
        assert not parse_command(".exit").records_history
        assert not parse_command(".it").records_history


@pytest.fixture
def mock_session(renderer, make_reader):
    """Session over a mocked connection."""
    connection = Mock()
    session = Session(
        connection,
        make_reader([]),
        history=LineHistory(),
        renderer=renderer,
    )
    return session


class TestDispatcherWithMocks:

    def test_exit_terminates(self, mock_session):
        assert mock_session.dispatcher.dispatch(".exit") is True
        mock_session.connection.prepare.assert_not_called()

    def test_it_without_active_statement(self, mock_session):
        state_before = mock_session.state
        assert mock_session.dispatcher.dispatch(".it") is False
        assert "No active statement" in mock_session.renderer.output
        assert mock_session.state is state_before
        mock_session.connection.prepare.assert_not_called()

    def test_describe_issues_one_bound_query(self, mock_session):
        statement = Mock()
        statement.columns = []
        statement.fetch.return_value = False
        mock_session.connection.prepare_describe.return_value = statement

        mock_session.dispatcher.dispatch(".describe foo")

        mock_session.connection.prepare_describe.assert_called_once_with("foo")
        mock_session.connection.prepare.assert_not_called()
        statement.execute.assert_called_once()
        assert mock_session.history.entries == [".describe foo"]

    def test_describe_uses_unbounded_page(self, mock_session, monkeypatch):
        dispatcher = mock_session.dispatcher
        calls = []
        monkeypatch.setattr(dispatcher, "run_statement", lambda st, size: calls.append(size))
        dispatcher.dispatch(".describe foo")
        assert calls == [UNBOUNDED_PAGE_SIZE]

    def test_prepare_failure_is_reported(self, mock_session):
        mock_session.connection.prepare.side_effect = DatabaseError("prepare", "bad")
        assert mock_session.dispatcher.dispatch("SELECT") is False
        assert "Error prepare: bad" in mock_session.renderer.errors
        assert mock_session.history.entries == []

    def test_execute_failure_closes_statement(self, mock_session):
        statement = Mock()
        statement.execute.side_effect = DatabaseError("execute", "ORA-00942")
        mock_session.connection.prepare.return_value = statement

        mock_session.dispatcher.dispatch("SELECT * FROM nope")

        statement.close.assert_called_once()
        assert mock_session.active_statement is None
        assert "Error execute: ORA-00942" in mock_session.renderer.errors
        assert mock_session.history.entries == []

    def test_connection_loss_propagates(self, mock_session):
        statement = Mock()
        statement.execute.side_effect = ConnectionLostError("execute", "gone")
        mock_session.connection.prepare.return_value = statement

        with pytest.raises(ConnectionLostError):
            mock_session.dispatcher.dispatch("SELECT 1")
        assert mock_session.active_statement is None

    def test_dispatcher_handles_every_kind(self, mock_session):
        dispatcher = CommandDispatcher(mock_session)
        assert set(dispatcher._handlers) == set(CommandKind)
