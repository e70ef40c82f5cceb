"""
API virtualization toolkit.

Aggregates mock definition files into a catalog for the stub server and
provides the response functions it calls at request time.
"""

__version__ = "1.0.0"
