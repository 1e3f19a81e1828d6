"""Tests for the OutputHandler module."""

from unittest.mock import patch, call

from aws_saml_roles.output import OutputHandler
from aws_saml_roles.types import IamRoleAssignment


class TestOutputHandler:
    """Test OutputHandler class methods."""

    def test_step_completed(self) -> None:
        """Test step_completed logs completion message."""
        with patch('aws_saml_roles.output.logger.info') as mock_logger:
            OutputHandler.step_completed("set_aws_attributes", 2, 5)

        mock_logger.assert_called_once_with(
            "set_aws_attributes completed: "
            "2 attributes in, 5 attributes out"
        )

    def test_error(self) -> None:
        """Test error prints formatted error message."""
        with patch('builtins.print') as mock_print:
            test_error = ValueError("test error message")
            OutputHandler.error("Test Error", test_error)

        mock_print.assert_called_once_with(
            "\n🚨 Test Error:\ntest error message\n"
        )

    def test_success_with_dict_data(self) -> None:
        """Test success prints formatted message with JSON dict."""
        with patch('builtins.print') as mock_print:
            test_data = {"uid": ["alice"], "group": ["admin"]}
            OutputHandler.success("Attributes", test_data)

        calls = mock_print.call_args_list
        assert len(calls) == 2
        assert calls[0] == call("\n✅ Attributes")
        assert '"uid": [' in calls[1][0][0]
        assert '"alice"' in calls[1][0][0]

    def test_success_with_non_json_values(self) -> None:
        """Test success falls back to str() for values JSON cannot encode."""
        with patch('builtins.print') as mock_print:
            OutputHandler.success("Final Config", {"local_roles": frozenset({"admin"})})

        assert "admin" in mock_print.call_args_list[1][0][0]

    def test_success_with_string_data(self) -> None:
        """Test success prints formatted message with string data."""
        with patch('builtins.print') as mock_print:
            OutputHandler.success("Test Success", "simple string data")

        expected_calls = [
            call("\n✅ Test Success"),
            call("simple string data")
        ]
        mock_print.assert_has_calls(expected_calls)

    def test_success_without_data(self) -> None:
        """Test success prints only title when no data provided."""
        with patch('builtins.print') as mock_print:
            OutputHandler.success("Test Success")

        mock_print.assert_called_once_with("\n✅ Test Success")

    def test_section_header(self) -> None:
        """Test section_header prints formatted header."""
        with patch('builtins.print') as mock_print:
            OutputHandler.section_header("Test Section")

        expected_calls = [
            call("\n" + "=" * 80),
            call("Test Section"),
            call("=" * 80)
        ]
        mock_print.assert_has_calls(expected_calls)

    def test_role_assignments(self) -> None:
        """Test role_assignments prints one line per granted role."""
        assignments = [
            IamRoleAssignment.for_role("123456789012", "Admins", "idp1"),
            IamRoleAssignment.for_role("123456789012", "Viewers", "idp1"),
        ]
        with patch('builtins.print') as mock_print:
            OutputHandler.role_assignments(assignments)

        mock_print.assert_has_calls([
            call("IAM ROLE ASSIGNMENTS"),
            call("Admins via idp1 in account 123456789012"),
            call("Viewers via idp1 in account 123456789012"),
        ])

    def test_role_assignments_empty(self) -> None:
        """Test role_assignments reports when no role was granted."""
        with patch('builtins.print') as mock_print:
            OutputHandler.role_assignments([])

        assert mock_print.call_args_list[-1] == call("(none)")
