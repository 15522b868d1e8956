"""kn - command line tool for Knative serving resources."""

__version__ = "0.1.0"
