#!/usr/bin/env python3
"""Development runner with live reload for the PySide6 app."""

import os
import signal
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

_MODULE = "countries_forms"


class AppRestartHandler(FileSystemEventHandler):
    """Handles file changes and restarts the app."""

    # Author: Rich Lewis - GitHub: @RichLewis007

    def __init__(self, restart_callback, debounce_seconds=0.5):
        super().__init__()
        self.restart_callback = restart_callback
        self.last_restart = 0.0
        self.debounce_seconds = debounce_seconds

    def should_restart(self, file_path):
        """Restart on Python, Qt Designer or stylesheet changes."""
        return Path(file_path).suffix in {".py", ".ui", ".qss"}

    def on_modified(self, event):
        if event.is_directory or not self.should_restart(event.src_path):
            return
        now = time.time()
        if now - self.last_restart > self.debounce_seconds:
            self.last_restart = now
            print(f"\nFile changed: {event.src_path}")
            print("   Restarting app...\n")
            self.restart_callback()


class DevServer:
    """Runs the app as a subprocess and restarts it when sources change."""

    def __init__(self, src_dir, app_args=()):
        self.src_dir = Path(src_dir).resolve()
        self.app_args = list(app_args)
        self.process = None
        self.observer = None
        self.should_run = True

    def start_app(self):
        if self.process:
            self.stop_app()
        env = os.environ.copy()
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(self.src_dir), env.get("PYTHONPATH", "")) if p
        )
        self.process = subprocess.Popen(
            [sys.executable, "-m", _MODULE, *self.app_args],
            env=env,
            stdout=sys.stdout,
            stderr=sys.stderr,
        )

    def stop_app(self):
        if self.process:
            try:
                self.process.terminate()
                self.process.wait(timeout=2)
            except subprocess.TimeoutExpired:
                self.process.kill()
                self.process.wait()
            except ProcessLookupError:
                pass  # already exited
            self.process = None

    def restart_app(self):
        self.stop_app()
        time.sleep(0.2)
        self.start_app()

    def setup_watcher(self):
        handler = AppRestartHandler(self.restart_app)
        self.observer = Observer()
        self.observer.schedule(handler, str(self.src_dir), recursive=True)
        print(f"Watching: {self.src_dir}")
        self.observer.start()

    def run(self):
        print("Starting development server with live reload...")
        print("   Press Ctrl+C to stop\n")

        def signal_handler(sig, frame):
            print("\n\nStopping development server...")
            self.should_run = False
            self.stop_app()
            if self.observer:
                self.observer.stop()
            sys.exit(0)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        self.setup_watcher()
        self.start_app()

        try:
            while self.should_run:
                if self.process and self.process.poll() is not None:
                    print("\nApp exited. Restarting...\n")
                    self.start_app()
                time.sleep(0.5)
        except KeyboardInterrupt:
            signal_handler(None, None)


def main():
    src_dir = Path(__file__).resolve().parent.parent / "src"
    if not (src_dir / _MODULE).exists():
        print(f"Error: could not find {src_dir / _MODULE}")
        sys.exit(1)
    DevServer(src_dir, sys.argv[1:]).run()


if __name__ == "__main__":
    main()
