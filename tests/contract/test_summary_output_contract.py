from __future__ import annotations
import re

SUMMARY_REGEX = re.compile(
    r"^SUMMARY rows=\d+ packages=\d+ incomplete=\d+ failed=\d+ elapsed_sec=[0-9]+(\.[0-9]+)?$"
)


def test_summary_regex_example():
    sample = "SUMMARY rows=120 packages=117 incomplete=2 failed=1 elapsed_sec=0.42"
    assert SUMMARY_REGEX.match(sample)


def test_cli_summary_line_matches_contract(write_config, sample_workbook, capsys):
    from exceptions_maker.cli import main as cli_main
    assert cli_main([]) == 0
    lines = [x for x in capsys.readouterr().out.splitlines() if x.startswith("SUMMARY ")]
    assert len(lines) == 1
    assert SUMMARY_REGEX.match(lines[0]), lines[0]
