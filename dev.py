#!/usr/bin/env python3
"""
Dev mode runner for the minigrep MCP server

Runs `minigrep.server` over streamable HTTP and restarts it whenever a
module under minigrep/ is created, changed or moved. Extra arguments are
passed through to the server:

  python dev.py                 # port 8080
  python dev.py --port 6661
"""
import argparse
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEvent, PatternMatchingEventHandler
from watchdog.observers import Observer

PACKAGE_DIR = Path(__file__).parent / "minigrep"
RESTART_DELAY = 0.3  # seconds of quiet before restarting


class ServerReloader(PatternMatchingEventHandler):
    """Collects source changes; the main loop restarts the server once they settle."""

    def __init__(self, server_args: list[str]):
        super().__init__(patterns=["*.py"], ignore_directories=True)
        self.server_args = server_args
        self.process: subprocess.Popen | None = None
        self.changed_at: float | None = None

    def on_any_event(self, event: FileSystemEvent):
        if event.event_type in ("created", "modified", "moved"):
            rel = Path(str(event.src_path)).relative_to(PACKAGE_DIR)
            print(f"[dev] {rel} {event.event_type}")
            self.changed_at = time.monotonic()

    def start(self):
        cmd = [sys.executable, "-m", "minigrep.server", "--transport", "streamable-http", *self.server_args]
        # Output goes straight to this terminal
        self.process = subprocess.Popen(cmd)
        print(f"[dev] server PID {self.process.pid}: {' '.join(cmd[1:])}")

    def stop(self):
        if self.process and self.process.poll() is None:
            self.process.terminate()
            self.process.wait()

    def restart_if_settled(self):
        if self.changed_at is not None and time.monotonic() - self.changed_at >= RESTART_DELAY:
            self.changed_at = None
            self.stop()
            self.start()


def main():
    parser = argparse.ArgumentParser(description="Auto-restart the minigrep MCP server on source changes")
    parser.add_argument("--port", type=int, default=8080, help="Server port (default: 8080)")
    parser.add_argument("--host", default="127.0.0.1", help="Server host (default: 127.0.0.1)")
    args = parser.parse_args()

    reloader = ServerReloader(["--host", args.host, "--port", str(args.port)])
    observer = Observer()
    observer.schedule(reloader, str(PACKAGE_DIR), recursive=True)
    observer.start()
    reloader.start()
    print(f"[dev] watching {PACKAGE_DIR} (Ctrl+C to stop)")

    try:
        while True:
            reloader.restart_if_settled()
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n[dev] stopping")
    finally:
        observer.stop()
        reloader.stop()
        observer.join()


if __name__ == "__main__":
    main()
