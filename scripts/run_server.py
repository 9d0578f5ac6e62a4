#!/usr/bin/env python3
import argparse
import os
import subprocess
import sys
import time

import httpx


def _repo_root() -> str:
    # scripts/run_server.py -> repo root is parent of scripts/
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _spawn_uvicorn(host: str, port: int, reload: bool, env_extra: dict) -> subprocess.Popen:
    env = os.environ.copy()
    env.update(env_extra)
    env["PYTHONUNBUFFERED"] = "1"

    # Use python -m uvicorn to ensure we use the same interpreter/venv
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "app.main:app",
        "--port",
        str(port),
        "--host",
        host,
    ]
    if reload:
        cmd.append("--reload")

    return subprocess.Popen(cmd, cwd=_repo_root(), env=env)


def _poll_ready(host: str, port: int, timeout_s: float) -> None:
    deadline = time.time() + timeout_s
    url = f"http://{host}:{port}/health"

    while True:
        try:
            r = httpx.get(url, timeout=httpx.Timeout(1.0, connect=0.5))
            if r.status_code == 200:
                return
            problem = f"status={r.status_code}"
        except httpx.HTTPError as e:
            problem = f"error={type(e).__name__}"

        if time.time() > deadline:
            print(f"Server did not become ready within timeout ({problem}).")
            raise SystemExit(2)
        time.sleep(0.5)


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the tender search API locally.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--endpoint", default=None, help="OpenSearch endpoint, overrides SEARCH_ENDPOINT")
    parser.add_argument("--index", default=None, help="Index name, overrides SEARCH_INDEX")
    parser.add_argument("--reload", action="store_true", help="Run uvicorn with --reload (dev only)")
    parser.add_argument("--wait-ready", action="store_true", help="Block until /health answers")
    parser.add_argument("--ready-timeout", type=float, default=20.0, help="Seconds to wait for readiness")
    args = parser.parse_args()

    env_extra = {}
    if args.endpoint:
        env_extra["SEARCH_ENDPOINT"] = args.endpoint
    if args.index:
        env_extra["SEARCH_INDEX"] = args.index

    if "SEARCH_ENDPOINT" not in env_extra and not os.getenv("SEARCH_ENDPOINT"):
        print("SEARCH_ENDPOINT is not set; pass --endpoint or export it.")
        return 2

    proc = _spawn_uvicorn(args.host, args.port, args.reload, env_extra)
    print(f"Started uvicorn pid={proc.pid} on http://{args.host}:{args.port}")

    try:
        if args.wait_ready:
            _poll_ready(args.host, args.port, args.ready_timeout)
            print("Server is ready.")
        return proc.wait()
    except KeyboardInterrupt:
        proc.terminate()
        try:
            proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            proc.kill()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
