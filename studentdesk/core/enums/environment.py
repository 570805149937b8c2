"""Deployment environment names read from ``ENVIRONMENT``."""

from enum import Enum


class Environment(str, Enum):
    """Where the process runs; picks the log renderer in the container."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
