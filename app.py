from app import create_app

# Expose a WSGI-compatible app object for production servers (e.g., gunicorn, waitress)
app = create_app()

# Developer-friendly startup
import os
import sys
import socket
import webbrowser
from threading import Timer


def check_port(port):
    """Check if a port is available"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    result = sock.connect_ex(('127.0.0.1', port))
    sock.close()
    return result != 0


def find_available_port(start_port=5173, max_port=5273):
    """Find an available port starting from start_port"""
    for port in range(start_port, max_port):
        if check_port(port):
            return port
    return None


def open_browser(url):
    """Open browser after a delay"""
    def open_url():
        try:
            webbrowser.open(url)
            app.logger.info(f"Opening browser at {url}")
        except webbrowser.Error as e:
            app.logger.warning(f"Could not open browser automatically: {e}")
            print(f"Please manually open: {url}")

    Timer(2.0, open_url).start()


def print_startup_info(port):
    """Print startup information"""
    print("🚀 Starting EDmin Dashboard")
    print("=" * 50)
    print(f"📍 Local URL: http://localhost:{port}")
    print(f"📍 Backend API: {app.config['BACKEND_URL']}")
    print("=" * 50)
    print("📋 Available Pages:")
    print("  ✅ Dashboard (tenants, students, classes, announcements, invoices)")
    print("  ✅ Backend & DB Test (/test)")
    print("  ✅ JSON state (/api/state)")
    print("=" * 50)
    print("⚠️  Press Ctrl+C to stop the server")
    print("=" * 50)


def main():
    """Main startup function for developer runs"""
    port = int(os.environ['PORT']) if os.environ.get('PORT') else find_available_port()
    if not port:
        print("❌ No available ports found in range 5173-5273")
        print("Set PORT or close other applications using these ports and try again.")
        return False

    print_startup_info(port)

    if not os.getenv('EDMIN_NO_BROWSER'):
        open_browser(f"http://localhost:{port}")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=os.getenv('FLASK_DEBUG', '1') == '1',
        use_reloader=False  # Disable reloader to prevent double startup
    )
    return True


if __name__ == '__main__':
    try:
        success = main()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\n👋 EDmin dashboard stopped by user")
        sys.exit(0)
