from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
ENTRYPOINTS = {
    "server": REPO_ROOT / "backend" / "server.py",
    "menu": REPO_ROOT / "backend" / "planner_menu.py",
}


def run_local(mode: str = "server") -> int:
    entrypoint = ENTRYPOINTS[mode]
    if not entrypoint.is_file():
        print(
            f"[run-local] ERROR: entrypoint missing: {entrypoint}",
            file=sys.stderr,
            flush=True,
        )
        return 1

    print(f"[run-local] Starting {mode}...", flush=True)
    try:
        proc = subprocess.run([sys.executable, str(entrypoint)], cwd=str(REPO_ROOT))
        return proc.returncode
    except KeyboardInterrupt:
        print("\n[run-local] Stopped by user.", flush=True)
        return 130


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the course planner locally.")
    parser.add_argument("mode", nargs="?", default="server", choices=sorted(ENTRYPOINTS))
    args = parser.parse_args(argv)
    return run_local(args.mode)


if __name__ == "__main__":
    raise SystemExit(main())
