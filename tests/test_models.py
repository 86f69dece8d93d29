import pytest

from pkgward.models.result import Action, CommandResult, ServiceResolution


class TestAction:
    @pytest.mark.parametrize("text,expected", [
        ("start", Action.START),
        ("  Start ", Action.START),
        ("STOP", Action.STOP),
        ("\tstatus\n", Action.STATUS),
    ])
    def test_parse_normalizes_case_and_whitespace(self, text, expected):
        assert Action.parse(text) is expected

    @pytest.mark.parametrize("text", ["restart", "", "st art", None])
    def test_parse_rejects_unknown(self, text):
        assert Action.parse(text) is None

    def test_choices_order(self):
        assert Action.choices() == ["start", "stop", "status"]


class TestCommandResult:
    def test_succeeded_follows_returncode(self):
        assert CommandResult(["true"], 0).succeeded
        assert not CommandResult(["false"], 1).succeeded

    def test_error_message_prefers_stderr(self):
        result = CommandResult(["apt-get"], 100, diagnostic="E: Unable to locate package badpkg\n")
        assert result.error_message == "E: Unable to locate package badpkg"

    def test_error_message_without_stderr(self):
        assert CommandResult(["x"], 3).error_message == "exit status 3"

    def test_text_joins_output_and_diagnostic(self):
        result = CommandResult(["systemctl"], 4, output="partial", diagnostic="Unit x.service could not be found.\n")
        assert result.text == "partial\nUnit x.service could not be found.\n"

    def test_text_with_only_stdout(self):
        assert CommandResult(["systemctl"], 0, output="active\n").text == "active\n"


class TestServiceResolution:
    def test_empty_service_name_rejected(self):
        with pytest.raises(ValueError):
            ServiceResolution(package="nginx", service_name="")

    def test_ambiguity(self):
        resolution = ServiceResolution("x", "a.service", ["a.service", "b.service"])
        assert resolution.is_ambiguous
        assert not ServiceResolution("x", "a.service", ["a.service"]).is_ambiguous
