import os
from dotenv import load_dotenv

load_dotenv()


def _default_backend_url() -> str:
    # Vite-era deployments exported VITE_BACKEND_URL; honour it as a fallback
    url = os.environ.get('VITE_BACKEND_URL') or 'http://localhost:8000'
    return url.rstrip('/')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'edmin-dashboard-secret'

    # REST backend the dashboard reads from and posts to
    BACKEND_URL = (os.environ.get('BACKEND_URL') or _default_backend_url()).rstrip('/')
    BACKEND_TIMEOUT = float(os.environ.get('BACKEND_TIMEOUT', 10))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    LOG_FILE = os.environ.get('LOG_FILE')
