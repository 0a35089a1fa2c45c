from roster import create_app

# Expose a WSGI-compatible app object for production servers (e.g., gunicorn, waitress)
app = create_app()

import os
import socket
import sys


def check_port(port):
    """Check if a port is available"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    result = sock.connect_ex(('127.0.0.1', port))
    sock.close()
    return result != 0


def find_available_port(start_port=3001, max_port=3100):
    """Find an available port starting from start_port"""
    for port in range(start_port, max_port):
        if check_port(port):
            return port
    return None


def main():
    """Developer entry point: run the API on the first free port"""
    port = int(os.environ.get('PORT', 0)) or find_available_port()
    if not port:
        app.logger.error('No available ports found in range 3001-3100')
        return False

    app.logger.info(f'Backend server running on port {port}')
    app.run(
        host='0.0.0.0',
        port=port,
        debug=os.environ.get('FLASK_ENV') == 'development',
        use_reloader=False  # Disable reloader to prevent double startup
    )
    return True


if __name__ == '__main__':
    sys.exit(0 if main() else 1)
