"""Single source of truth for the fsbox package version."""

VERSION = "1.0.0"
