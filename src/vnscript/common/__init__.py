"""Common utilities shared by vnscript components."""

from vnscript.common.file_source import read_scenario_lines, read_scenario_text

__all__ = ["read_scenario_lines", "read_scenario_text"]
