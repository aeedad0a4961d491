#!/usr/bin/env python3
"""
Test-suite report runner for huffstream.

Runs pytest over tests/ in a subprocess, turns the verbose output into one
record per test and writes a JSON report with environment metadata.

Run with:
    python evaluation/evaluation.py [--output PATH] [--timeout SECONDS]
"""
import argparse
import json
import os
import platform
import subprocess
import sys
import traceback
import uuid
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
OUTCOMES = ("PASSED", "FAILED", "ERROR", "SKIPPED", "XFAIL", "XPASS")


def generate_run_id():
    return uuid.uuid4().hex[:8]


def _git(*args):
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired):
        return "unknown"
    return result.stdout.strip() if result.returncode == 0 else "unknown"


def get_environment_info():
    """Collect environment information for the report."""
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "architecture": platform.machine(),
        "hostname": platform.node(),
        "git_commit": _git("rev-parse", "HEAD")[:8],
        "git_branch": _git("rev-parse", "--abbrev-ref", "HEAD"),
    }


def parse_pytest_verbose_output(output):
    """
    Extract per-test outcomes from `pytest -v` output.

    Matches lines like:
        tests/test_bitstream.py::test_reset_rewinds_to_open_position PASSED [ 12%]
    """
    tests = []
    for line in output.splitlines():
        line = line.strip()
        if "::" not in line:
            continue
        for word in OUTCOMES:
            marker = f" {word}"
            if marker in line:
                nodeid = line.split(marker)[0].strip()
                tests.append({
                    "nodeid": nodeid,
                    "name": nodeid.split("::")[-1],
                    "outcome": word.lower(),
                })
                break
    return tests


def summarize(tests):
    summary = {"total": len(tests)}
    for word in OUTCOMES:
        summary[word.lower()] = sum(1 for t in tests if t["outcome"] == word.lower())
    return summary


def run_test_suite(timeout):
    tests_dir = PROJECT_ROOT / "tests"
    cmd = [sys.executable, "-m", "pytest", str(tests_dir), "-v", "--tb=short"]
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))

    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            env=env,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        print(f"Test run timed out after {timeout}s")
        return {"success": False, "exit_code": -1, "tests": [],
                "summary": {"error": "timeout"}, "stdout": "", "stderr": ""}

    tests = parse_pytest_verbose_output(result.stdout)
    summary = summarize(tests)
    print(f"Results: {summary['passed']} passed, {summary['failed']} failed, "
          f"{summary['error']} errors, {summary['skipped']} skipped (total: {summary['total']})")
    for test in tests:
        if test["outcome"] in ("failed", "error"):
            print(f"  {test['outcome'].upper()}: {test['nodeid']}")

    return {
        "success": result.returncode == 0,
        "exit_code": result.returncode,
        "tests": tests,
        "summary": summary,
        "stdout": result.stdout[-3000:],
        "stderr": result.stderr[-1000:],
    }


def generate_output_path(now):
    """evaluation/YYYY-MM-DD/HH-MM-SS/report.json"""
    return PROJECT_ROOT / "evaluation" / now.strftime("%Y-%m-%d") / now.strftime("%H-%M-%S") / "report.json"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the huffstream test suite and write a JSON report")
    parser.add_argument("--output", type=str, default=None,
                        help="report path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)")
    parser.add_argument("--timeout", type=int, default=600, help="seconds before the test run is abandoned")
    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()
    print(f"Run ID: {run_id}")

    try:
        results = run_test_suite(args.timeout)
        success = results["success"]
        error_message = None if success else "test suite failed"
    except OSError as e:
        traceback.print_exc()
        results = None
        success = False
        error_message = str(e)

    finished_at = datetime.now()
    report = {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round((finished_at - started_at).total_seconds(), 6),
        "success": success,
        "error": error_message,
        "environment": get_environment_info(),
        "results": results,
    }

    output_path = Path(args.output) if args.output else generate_output_path(started_at)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)

    print(f"Report saved to: {output_path}")
    print(f"Success: {'YES' if success else 'NO'}")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
