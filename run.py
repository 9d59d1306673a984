# =============================================================================
# run.py — Starts the backend (FastAPI) then the resume form UI (Streamlit)
# =============================================================================
# Usage: python run.py
# Backend: http://127.0.0.1:8000
# UI: http://127.0.0.1:8501
# =============================================================================

import os
import subprocess
import sys
import threading
import time
import urllib.request
import webbrowser

BACKEND_HOST = "127.0.0.1"
BACKEND_PORT = 8000
STREAMLIT_PORT = 8501

# Project root (where run.py lives)
ROOT = os.path.dirname(os.path.abspath(__file__))


def wait_for_backend(url: str, timeout: float = 60.0) -> bool:
    print(f"Waiting for backend at {url}...", end="", flush=True)
    start = time.monotonic()
    while time.monotonic() - start < timeout:
        try:
            with urllib.request.urlopen(f"{url}/health", timeout=2) as response:
                if response.status == 200:
                    print(" Ready!")
                    return True
        except OSError:
            print(".", end="", flush=True)
            time.sleep(1)
    print(" Timeout.")
    return False


def main() -> int:
    print("Starting AI Resume Snippet Generator...")

    backend_url = f"http://{BACKEND_HOST}:{BACKEND_PORT}"
    backend_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "app.main:app",
        "--host", BACKEND_HOST,
        "--port", str(BACKEND_PORT),
    ]

    print(f"Starting backend on {backend_url}...")
    backend_proc = subprocess.Popen(backend_cmd, cwd=ROOT, env=os.environ.copy())

    if not wait_for_backend(backend_url):
        print("Backend failed to start within timeout.")
        backend_proc.terminate()
        return 1

    streamlit_cmd = [
        sys.executable,
        "-m", "streamlit",
        "run", "streamlit_app.py",
        "--server.port", str(STREAMLIT_PORT),
        "--server.address", "127.0.0.1",
        "--browser.gatherUsageStats", "false",
        "--server.headless", "true",
    ]

    front_env = os.environ.copy()
    front_env["BACKEND_URL"] = backend_url

    print(f"Starting streamlit UI on http://127.0.0.1:{STREAMLIT_PORT}...")

    def open_browser():
        time.sleep(3)  # give streamlit time to bind
        webbrowser.open(f"http://127.0.0.1:{STREAMLIT_PORT}")

    threading.Thread(target=open_browser, daemon=True).start()

    try:
        subprocess.run(streamlit_cmd, cwd=ROOT, env=front_env)
    except KeyboardInterrupt:
        print("\nShutting down...")
    finally:
        backend_proc.terminate()
        backend_proc.wait(timeout=5)
    return 0


if __name__ == "__main__":
    sys.exit(main())
