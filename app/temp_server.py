"""
Temporary file server for previewing a built site locally
"""
import logging
import threading
import socket
from functools import partial
from http.server import HTTPServer, SimpleHTTPRequestHandler
from pathlib import Path

logger = logging.getLogger(__name__)


class QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        logger.debug("preview: " + format, *args)


class TempSiteServer:
    def __init__(self):
        self.server = None
        self.server_thread = None
        self.directory = None
        self.port = None
        self.is_running = False

    def start_server(self, directory: str | Path, filename: str = "index.html") -> str:
        """
        Serve *directory* over HTTP on a free port.
        Returns the URL of *filename* inside it.
        Stops any server that is already running first.
        """
        if self.is_running:
            self.stop_server()

        self.directory = str(Path(directory).resolve())
        self.port = self._find_free_port()

        handler = partial(QuietHandler, directory=self.directory)
        self.server = HTTPServer(("0.0.0.0", self.port), handler)

        # Start server in background thread
        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.is_running = True
        logger.info("Serving %s on port %d", self.directory, self.port)
        local_ip = self._get_local_ip()
        return f"Local URL: http://localhost:{self.port}/{filename}\nNetwork URL: http://{local_ip}:{self.port}/{filename}"

    def stop_server(self):
        """Stop the temporary server"""
        if self.server:
            try:
                self.server.shutdown()
                self.server.server_close()
            except OSError as e:
                logger.debug("Error while stopping preview server: %s", e)
            self.server = None

        if self.server_thread:
            self.server_thread.join(timeout=2)  # Wait up to 2 seconds
            self.server_thread = None

        self.directory = None
        self.is_running = False

    def update_content(self, directory: str | Path, filename: str = "index.html") -> str:
        """
        Point the preview at *directory*. Keeps the current port when the
        directory is unchanged, otherwise (re)starts the server.
        """
        if self.is_running and self.directory == str(Path(directory).resolve()):
            return f"http://localhost:{self.port}/{filename}"
        return self.start_server(directory, filename)

    def is_server_running(self) -> bool:
        """Check if the server is currently running"""
        return self.is_running and self.server is not None

    def get_current_url(self) -> str | None:
        """Get the current server URL if running, None otherwise"""
        if self.is_server_running():
            return f"http://localhost:{self.port}/index.html"
        return None

    def _find_free_port(self) -> int:
        """Find a free port to use for the server"""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("", 0))
            s.listen(1)
            port = s.getsockname()[1]
        return port

    def _get_local_ip(self):
        """Get the local network IP address of the machine."""
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            # Doesn't have to be reachable
            s.connect(("8.8.8.8", 80))
            ip = s.getsockname()[0]
        except OSError:
            ip = "127.0.0.1"
        finally:
            s.close()
        return ip


# Global instance shared by the CLI and the streamlit app
_temp_server = TempSiteServer()


def serve_site(directory: str | Path, filename: str = "index.html") -> str:
    """
    Serve a built site temporarily.
    Reuses the running server when it already serves *directory*.
    Returns URL where the page can be accessed.
    """
    return _temp_server.update_content(directory, filename)


def cleanup_temp_server():
    """Stop the preview server"""
    _temp_server.stop_server()


def get_server_status() -> dict:
    """Get current server status information"""
    return {
        "is_running": _temp_server.is_server_running(),
        "url": _temp_server.get_current_url(),
        "port": _temp_server.port if _temp_server.is_running else None,
    }
