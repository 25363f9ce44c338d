#!/usr/bin/env python3
"""Development server runner for the commerce backend.

Sets up development environment defaults and starts the API server with reload.
"""

import os
import subprocess
import sys
from pathlib import Path

# Add the src directory to the path
project_root = Path(__file__).parent.parent  # .../backend
repo_root = project_root.parent  # repo root
src_path = project_root / "src"  # .../backend/src
sys.path.insert(0, str(src_path))


def setup_dev_environment():
    """Set up development environment variables."""
    if not os.environ.get("COMMERCE_DATABASE_URL"):
        os.environ["COMMERCE_DATABASE_URL"] = "sqlite+aiosqlite:///./commerce_dev.db"
        os.environ.setdefault("COMMERCE_DATABASE_AUTO_CREATE", "true")

    os.environ["COMMERCE_ENVIRONMENT"] = "development"
    os.environ["COMMERCE_DEBUG"] = "true"
    os.environ["COMMERCE_LOG_LEVEL"] = "DEBUG"

    print("Development environment configured:")
    print(f"  Database URL: {os.environ.get('COMMERCE_DATABASE_URL')}")
    print(f"  Log Level: {os.environ.get('COMMERCE_LOG_LEVEL')}")


def start_dev_server():
    """Start the development server."""
    from commerce.core.config import get_settings_instance

    settings = get_settings_instance()
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "commerce.main:app",
        "--app-dir",
        str(src_path),
        "--reload",
        "--host",
        settings.api_host,
        "--port",
        str(settings.api_port),
        "--log-level",
        "debug",
    ]

    print("Starting Commerce development server...")
    print(f"Server will be available at: http://{settings.api_host}:{settings.api_port}")
    try:
        subprocess.run(cmd, cwd=repo_root, check=False)
    except KeyboardInterrupt:
        print("\nShutting down development server...")


def main():
    setup_dev_environment()
    start_dev_server()


if __name__ == "__main__":
    main()
