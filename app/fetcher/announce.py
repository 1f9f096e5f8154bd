"""
Serialized console announcements for fetch threads.
"""

import sys


def announce(lock, message, out=None):
    """
    Print one line while holding lock, so concurrent announcements never
    interleave within a line.
    """
    with lock:
        print(message, file=out or sys.stdout, flush=True)
