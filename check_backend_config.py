#!/usr/bin/env python3
"""
Backend Configuration Checker for the EDmin dashboard

This script shows which REST backend the dashboard will talk to and checks
that the health endpoint and every collection endpoint answer.
"""

import os
import sys

from dotenv import load_dotenv


def check_backend_config():
    """Check if the backend configuration is usable"""
    print("🔌 EDmin Backend Configuration Checker")
    print("=" * 50)

    # Load environment variables before config reads them
    load_dotenv()

    from config import Config
    from app.services.backend_client import BackendClient
    from app.services.dashboard_service import DashboardController

    source = 'BACKEND_URL' if os.environ.get('BACKEND_URL') else (
        'VITE_BACKEND_URL' if os.environ.get('VITE_BACKEND_URL') else 'default'
    )
    print(f"✅ BACKEND_URL: {Config.BACKEND_URL} (from {source})")
    print(f"✅ BACKEND_TIMEOUT: {Config.BACKEND_TIMEOUT}s")

    if not Config.BACKEND_URL.startswith(('http://', 'https://')):
        print("\n❌ ERROR: BACKEND_URL must start with http:// or https://")
        return False

    client = BackendClient(base_url=Config.BACKEND_URL, timeout=Config.BACKEND_TIMEOUT)
    results = DashboardController(client).diagnose()

    print("")
    for result in results:
        mark = "✅" if result['ok'] else "❌"
        print(f"{mark} GET {result['path']:<15} {result['detail']}")

    if not all(result['ok'] for result in results):
        print("\n❌ Some backend endpoints are not answering")
        print("   Check that the backend is running and BACKEND_URL in .env points at it")
        return False

    print("\n✅ Backend configuration looks good!")
    print("\n📝 Next step: start the dashboard with 'python app.py'")
    return True


if __name__ == "__main__":
    sys.exit(0 if check_backend_config() else 1)
