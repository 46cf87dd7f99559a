## strfmt — CLI integration tests

import os, sys
import subprocess


def run_cli(*cli_args: str, stdin: str | None = None, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "strfmt", "--plain", *cli_args]
    merged_env = os.environ.copy()
    if env:
        merged_env.update(env)
    return subprocess.run(args, input=stdin, capture_output=True, text=True, env=merged_env)


def test_cli_formats_string_arguments():
    result = run_cli("{0:>5}|{1}", "x", "y")
    assert result.returncode == 0
    assert result.stdout == "    x|y\n"


def test_cli_decodes_json_arguments():
    result = run_cli("--json", "{0:,} {1.name}", "1234567", '{"name": "Ada"}')
    assert result.returncode == 0
    assert result.stdout == "1,234,567 Ada\n"


def test_cli_reads_template_from_stdin():
    result = run_cli("-", "hi", stdin="{0}!\n")
    assert result.stdout == "hi!\n"


def test_cli_index_error_shows_context():
    result = run_cli("{3}", "a")
    assert result.returncode == 1
    out = result.stdout
    assert "INDEX ERROR." in out
    assert "Template" in out and '"{3}"' in out
    assert "Index     3 (of 1 arguments)" in out
    assert "\033[" not in out


def test_cli_recursion_error():
    result = run_cli("{0}", "{0}")
    assert result.returncode == 1
    assert "RECURSION ERROR." in result.stdout


def test_cli_type_error():
    result = run_cli("--json", "{0}", "[1, 2]")
    assert result.returncode == 1
    assert "TYPE ERROR." in result.stdout
    assert "Value     [1, 2]" in result.stdout


def test_cli_recursion_limit_from_environment():
    result = run_cli("{0:{1}}", "3.14159", ".2f", env={"STRFMT_MAX_PASSES": "1"})
    assert result.returncode == 1
    assert "RECURSION ERROR." in result.stdout
