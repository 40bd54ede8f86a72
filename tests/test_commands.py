import dataclasses

import pytest

from msdf.commands import CommandInfo, format_help, register_commands


def test_register_ls():
    commands = register_commands()
    assert "ls" in commands
    factory = commands["ls"]
    assert isinstance(factory, CommandInfo)
    assert factory.name == "ls"
    assert factory.description == "list the contents of an SDF file"


def test_registered_names_in_order():
    commands = register_commands()
    assert list(commands) == [
        "angular",
        "distfunc",
        "ls",
        "pcount",
        "penergy",
        "phaseplot",
        "screen",
        "toh5",
    ]


def test_joinslices_not_registered():
    assert "joinslices" not in register_commands()


def test_keys_match_names():
    for key, info in register_commands().items():
        assert key == info.name


def test_each_call_returns_fresh_mapping():
    first = register_commands()
    first.pop("ls")
    assert "ls" in register_commands()


def test_command_info_is_frozen():
    info = register_commands()["toh5"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.name = "other"
    assert info.name == "toh5"


def test_format_help_header_and_footer():
    text = format_help(register_commands())
    assert text.startswith(
        "\n  Manipulate SDF files\n\n  Usage:\n    msdf command [options]\n\n"
        "  where 'command' is one of the following:\n\n"
    )
    assert text.endswith(
        "\n  Type\n    mcfd help command\n  to get more help on individual commands.\n\n"
    )


def test_format_help_command_lines():
    text = format_help(register_commands())
    assert "      ls          list the contents of an SDF file\n" in text
    assert "      toh5        writes a data block to HDF5\n" in text
    assert "      phaseplot   Writes phase-plots for species" in text


def test_format_help_sorted_lines():
    commands = {
        "b": CommandInfo("b", "second"),
        "a": CommandInfo("a", "first"),
    }
    text = format_help(commands)
    lines = [line for line in text.splitlines() if line.startswith("      ")]
    assert lines == ["      a           first", "      b           second"]


def test_format_help_long_name_not_truncated():
    commands = {"verylongname": CommandInfo("verylongname", "desc")}
    assert "      verylongname  desc\n" in format_help(commands)


def test_format_help_empty():
    text = format_help({})
    assert "following:\n\n\n  Type" in text