"""
Local development launcher for PassMeter.

Automatically loads .env from the project root, then starts uvicorn.

Usage:
    python run_server.py
"""
import os
from pathlib import Path

# ── 1. Load .env file if present ──────────────────────────────────────────
env_path = Path(__file__).parent / ".env"
if env_path.exists():
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            os.environ.setdefault(key.strip(), value.strip())
    print(f"[INFO] Loaded environment from {env_path}")
else:
    print(f"[INFO] No .env file found at {env_path}, using defaults")

# ── 2. Start server ───────────────────────────────────────────────────────
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "passmeter.main:app",
        host=os.environ.get("PASSMETER_HOST", "127.0.0.1"),
        port=int(os.environ.get("PASSMETER_PORT", "8001")),
        reload=False,
    )
