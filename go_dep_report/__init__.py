"""go-dep-report: list outdated dependencies of a remote Go module."""
