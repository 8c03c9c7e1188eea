"""Generate README documentation for GitLab CI/CD component templates."""

__version__ = "0.1.0"
