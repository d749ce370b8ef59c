#!/usr/bin/env python3
"""
Worksheet quality gates: rules file, lint, types and tests.

Writes a JSON summary to artifacts/quality_gates_run.json and exits non-zero
when any gate fails.
"""

import datetime
import json
import subprocess
import sys
from pathlib import Path
from typing import TypedDict

from src.rules.loader import load_rules

# --- Types ---


class GateResult(TypedDict):
    status: str  # "pass" | "fail"
    exit_code: int
    output: str
    command: list[str]


class GatesReport(TypedDict):
    timestamp_utc: str
    overall_status: str
    gates: dict[str, GateResult]


# --- Config ---

ARTIFACTS_DIR = Path("artifacts")
RULES_PATH = Path("rules.yaml")

COMMANDS = {
    "lint": [sys.executable, "-m", "ruff", "check", "."],
    "format": [sys.executable, "-m", "ruff", "format", "--check", "."],
    "types": [sys.executable, "-m", "mypy", "src", "--ignore-missing-imports"],
    "tests": [sys.executable, "-m", "pytest", "-q", "--maxfail=1"],
}

# --- Execution ---


def check_rules(path: Path) -> GateResult:
    command = ["load_rules", str(path)]
    print(f"[rules] Validating {path} ...", end="", flush=True)
    try:
        load_rules(path)
    except (FileNotFoundError, ValueError) as e:
        print(" FAIL")
        return {"status": "fail", "exit_code": 1, "output": str(e), "command": command}
    print(" PASS")
    return {"status": "pass", "exit_code": 0, "output": "", "command": command}


def run_command(name: str, cmd: list[str]) -> GateResult:
    print(f"[{name}] Running: {' '.join(cmd[1:])} ...", end="", flush=True)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        print(" ERROR")
        return {"status": "fail", "exit_code": -1, "output": str(e), "command": cmd}

    status = "pass" if result.returncode == 0 else "fail"
    print(f" {status.upper()}")
    return {
        "status": status,
        "exit_code": result.returncode,
        "output": result.stdout + result.stderr,
        "command": cmd,
    }


def main() -> None:
    print("=== Numeric Worksheet: Quality Gates ===")

    results: dict[str, GateResult] = {"rules": check_rules(RULES_PATH)}
    for name, cmd in COMMANDS.items():
        results[name] = run_command(name, cmd)

    failed = [name for name, res in results.items() if res["status"] != "pass"]
    report: GatesReport = {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "overall_status": "fail" if failed else "pass",
        "gates": results,
    }

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    report_path = ARTIFACTS_DIR / "quality_gates_run.json"
    report_path.write_text(json.dumps(report, indent=2))
    print(f"\nReport written to: {report_path}")

    if not failed:
        print("\nSUCCESS: All quality gates passed.")
        sys.exit(0)

    print("\nFAILURE: " + ", ".join(failed))
    for name in failed:
        res = results[name]
        print(f"\n--- {name} FAILED (exit code {res['exit_code']}) ---")
        if res["output"].strip():
            print(res["output"])
    sys.exit(1)


if __name__ == "__main__":
    main()
