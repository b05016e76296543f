"""
PATH: ./anylog/sinks/

Console: the ambient sink used when nothing else is configured. Mirrors a
platform console: error/warn/trace go to stderr, everything else to stdout,
arguments are separated by a single space.
"""

import sys
import traceback


class Console:
    def __init__(self, stdout=None, stderr=None):
        # resolved per call when not given, so redirected streams are honoured
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self):
        return self._stdout or sys.stdout

    @property
    def stderr(self):
        return self._stderr or sys.stderr

    def _write(self, stream, args) -> None:
        stream.write(" ".join(str(a) for a in args) + "\n")

    def log(self, *args) -> None:
        self._write(self.stdout, args)

    def info(self, *args) -> None:
        self._write(self.stdout, args)

    def debug(self, *args) -> None:
        self._write(self.stdout, args)

    def warn(self, *args) -> None:
        self._write(self.stderr, args)

    def error(self, *args) -> None:
        self._write(self.stderr, args)

    def trace(self, *args) -> None:
        self._write(self.stderr, ("Trace:",) + args)
        # drop this frame; the caller wants to see where trace() was called from
        self.stderr.write("".join(traceback.format_stack()[:-1]))
