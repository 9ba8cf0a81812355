#!/usr/bin/env python3
"""
Scripts for running backend and frontend.
"""

import os
import subprocess
import sys
from pathlib import Path

import uvicorn

PROJECT_ROOT = Path(__file__).resolve().parent


def run_backend():
    """Run the Flight Price Calendar backend API server."""
    print("🚀 Starting Flight Price Calendar Backend API...")
    print("📍 API: http://localhost:8000")
    print("-" * 40)

    uvicorn.run(
        "backend.api:app", host="0.0.0.0", port=8000, reload=True, log_level="info"
    )


def run_frontend():
    """Run the Flight Price Calendar Streamlit frontend."""
    print("🚀 Starting Flight Price Calendar Frontend...")
    print("📍 Frontend: http://localhost:8501")
    print("-" * 40)

    # frontend/app.py imports the backend models by package name
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(
        filter(None, [str(PROJECT_ROOT), os.environ.get("PYTHONPATH")])
    )}

    try:
        subprocess.run(
            [
                sys.executable,
                "-m",
                "streamlit",
                "run",
                str(PROJECT_ROOT / "frontend" / "app.py"),
                "--server.port=8501",
                "--server.address=0.0.0.0",
            ],
            check=True,
            env=env,
        )
    except KeyboardInterrupt:
        print("\n👋 Frontend stopped")
    except subprocess.CalledProcessError as e:
        print(f"❌ Frontend error: {e}")
        sys.exit(1)
