"""Decision helpers for the Terraform workspace sync controller."""

__version__ = "0.1.0"
