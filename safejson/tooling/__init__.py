"""
safejson developer tooling.
"""

from .literal_check import Violation, check_paths, find_violations

__all__ = ['Violation', 'check_paths', 'find_violations']
