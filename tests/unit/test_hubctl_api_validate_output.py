"""Unit tests for output schema validation."""

import pytest

from hubctl.api._output_schemas import get_output_schema
from hubctl.api._output_schemas.service import ServiceStartOutput
from hubctl.api.service.cmd_start import cmd_start
from hubctl.api.validate_output import validate_output


def test_schemas_registered_for_every_command():
    for domain, command in [
        ("service", "start"),
        ("service", "stop"),
        ("service", "restart"),
        ("service", "status"),
        ("service", "reload"),
        ("log", "logs"),
        ("log", "errors"),
        ("log", "list_logs"),
        ("log", "reset"),
    ]:
        assert get_output_schema(domain, command) is not None


def test_validate_output_accepts_matching_output():
    output = {
        "errors": [],
        "warnings": [],
        "service": "comelit-hub-hap",
        "platform": "linux",
        "changed": True,
        "running": True,
    }
    assert validate_output(cmd_start, output) == ServiceStartOutput(**output).model_dump(mode="python")


def test_validate_output_rejects_unknown_fields():
    with pytest.raises(ValueError, match="Output validation failed for service.start"):
        validate_output(cmd_start, {"errors": [], "warnings": [], "bogus": 1})


def test_validate_output_skips_non_api_functions():
    def helper():
        pass

    assert validate_output(helper, {"anything": 1}) == {"anything": 1}
